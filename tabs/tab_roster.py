"""Tab 4: Roster — member search, points ranking and paging."""

import streamlit as st
import pandas as pd

from data.session_store import get_members, get_dashboard_config, is_data_loaded
from engine.roster import search_members, sort_by_points, paginate
from config.defaults import ROSTER_PAGE_SIZE


def render(sidebar_state):
    """Render the Roster tab."""
    st.header("Roster")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Admin tab.")
        return

    page_size = get_dashboard_config().get("roster_page_size", ROSTER_PAGE_SIZE)

    search = st.text_input("Search name or email", "", key="roster_search")
    members = sort_by_points(search_members(get_members(), search))
    if not members:
        st.info("No members match the search.")
        return

    _, total_pages = paginate(members, 1, page_size)
    if st.session_state.get("roster_page", 1) > total_pages:
        st.session_state["roster_page"] = total_pages
    page = st.number_input("Page", min_value=1, max_value=total_pages, step=1, key="roster_page")
    page_members, total_pages = paginate(members, int(page), page_size)

    df = pd.DataFrame([{
        "Name": m.name,
        "Email": m.email,
        "Points": m.points,
        "Roles": ", ".join(m.roles),
    } for m in page_members])
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.caption(f"Page {int(page)} of {total_pages} · {len(members)} members")
