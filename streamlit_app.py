# streamlit_app.py
from __future__ import annotations

import os
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# ───────────────────────── .env LOAD ─────────────────────────
# Must run before utils.party_api reads its endpoint settings
load_dotenv(Path(__file__).resolve().parent / ".env")

from b_types.party_types import make_party_fields
from utils.helpers import (
    guest_list_markdown,
    guests_at_party,
    maps_search_url,
    party_form_defaults,
    party_list_entries,
    selected_party_markdown,
)
from utils.logging_config import setup_logging
from utils.party_api import (
    delete_party,
    get_guests,
    get_parties,
    get_party,
    get_rsvps,
    load_initial_data,
    save_party,
)
from utils.pdf_export import build_party_pdf
from utils.state import PlannerState, get_planner_state

setup_logging(os.getenv("LOG_LEVEL", "INFO"))

st.set_page_config(page_title="Party Planner", page_icon="🎉", layout="wide")

# ───────────────────────── Init ─────────────────────────
state = get_planner_state()
if not state.loaded:
    with st.spinner("Loading parties..."):
        load_initial_data(state)

# ───────────────────────── Render helpers ─────────────────────────
def render_party_list(state: PlannerState):
    entries = party_list_entries(state)
    if not entries:
        st.info("No parties yet.")
    for entry in entries:
        clicked = st.button(
            entry["name"] or "(unnamed)",
            key=f"party-{entry['id']}",
            type="primary" if entry["selected"] else "secondary",
        )
        if clicked:
            get_party(state, entry["id"], on_change=st.rerun)

    if st.button("🔄 Refresh", key="refresh"):
        get_parties(state)
        get_rsvps(state)
        get_guests(state)
        st.rerun()


def render_selected_party(state: PlannerState):
    st.markdown(selected_party_markdown(state))
    party = state.selected_party
    if not party:
        return

    guests = guests_at_party(state)
    st.markdown("**Guests**")
    st.markdown(guest_list_markdown(guests))

    col_maps, col_pdf, col_delete = st.columns(3)
    with col_maps:
        maps_url = maps_search_url(party.get("location"))
        if maps_url:
            st.link_button("🗺️ Open in Maps", maps_url)
    with col_pdf:
        st.download_button(
            label="⬇️ Party sheet (PDF)",
            data=build_party_pdf(party, guests),
            file_name=f"party_{party.get('id')}.pdf",
            mime="application/pdf",
        )
    with col_delete:
        if st.button("🗑️ Delete Party", key="delete-party"):
            delete_party(state, on_change=st.rerun)


def render_party_form(state: PlannerState):
    defaults = party_form_defaults(state)
    form_id = state.selected_id if state.selected_id is not None else "new"

    with st.form(f"party_form_{form_id}", clear_on_submit=False):
        st.subheader("Edit Party Details" if form_id != "new" else "New Party")
        name = st.text_input("Party Name", value=defaults["name"], key=f"name-{form_id}")
        description = st.text_area("Description", value=defaults["description"], key=f"description-{form_id}")
        col_date, col_loc = st.columns([1, 2])
        with col_date:
            when = st.date_input("Date", value=defaults["date"], key=f"date-{form_id}")
        with col_loc:
            location = st.text_input("Location", value=defaults["location"], key=f"location-{form_id}")
        submitted = st.form_submit_button(
            "Save Changes" if form_id != "new" else "Create Party",
            type="primary",
        )

    if submitted:
        fields = make_party_fields(name=name, description=description, location=location, when=when)
        save_party(state, fields, on_change=st.rerun)

# ───────────────────────── Render ─────────────────────────
st.title("🎉 Party Planner")

col_list, col_details = st.columns([1, 2])
with col_list:
    st.header("Upcoming Parties")
    render_party_list(state)

with col_details:
    st.header("Party Details", anchor="selected")
    render_selected_party(state)
    st.divider()
    render_party_form(state)
