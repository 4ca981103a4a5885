from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from b_types.party_types import Guest
from utils.state import PlannerState

SELECT_PROMPT = "Please select a party to learn more."


def calendar_date(iso: Any) -> str:
    """'2023-10-01T00:00:00Z' → '2023-10-01'. Non-strings give ''."""
    if not isinstance(iso, str):
        return ""
    return iso.strip()[:10]


def parse_calendar_date(iso: Any) -> Optional[date]:
    try:
        return date.fromisoformat(calendar_date(iso))
    except ValueError:
        return None


def text_or_blank(v: Any) -> str:
    return v if isinstance(v, str) else ("" if v is None else str(v))


def party_list_entries(state: PlannerState) -> List[Dict[str, Any]]:
    """
    One entry per party, in the order the API returned them.
    `selected` is True only for the party whose id equals the selected id.
    """
    selected_id = state.selected_id
    return [
        {
            "id": p.get("id"),
            "name": text_or_blank(p.get("name")),
            "selected": selected_id is not None and p.get("id") == selected_id,
        }
        for p in state.parties
    ]


def party_form_defaults(state: PlannerState) -> Dict[str, Any]:
    """Values to pre-fill the edit form with; blanks when nothing is selected."""
    p = state.selected_party or {}
    return {
        "name": text_or_blank(p.get("name")),
        "description": text_or_blank(p.get("description")),
        "date": parse_calendar_date(p.get("date")),
        "location": text_or_blank(p.get("location")),
    }


def guests_at_party(state: PlannerState) -> List[Guest]:
    """Guests with an RSVP for the selected party, in guest-collection order."""
    party_id = state.selected_id
    if party_id is None:
        return []
    attending = {r.get("guestId") for r in state.rsvps if r.get("eventId") == party_id}
    return [g for g in state.guests if g.get("id") in attending]


def guest_list_markdown(guests: List[Guest]) -> str:
    if not guests:
        return "_No RSVPs yet._"
    return "\n".join(f"- {text_or_blank(g.get('name'))}" for g in guests)


def selected_party_markdown(state: PlannerState) -> str:
    """Markdown for the details panel (without the guest list)."""
    p = state.selected_party
    if not p:
        return SELECT_PROMPT
    lines = [
        f"### {text_or_blank(p.get('name'))} #{p.get('id')}",
        f"🗓️ **Date:** {calendar_date(p.get('date'))}",
        f"📍 **Location:** {text_or_blank(p.get('location'))}",
        "",
        text_or_blank(p.get("description")),
    ]
    return "\n".join(lines).strip()


def maps_search_url(location: Any) -> Optional[str]:
    """Google Maps search link for a free-text location."""
    loc = text_or_blank(location).strip()
    if not loc:
        return None
    return f"https://www.google.com/maps/search/?api=1&query={quote_plus(loc)}"
