# party_api.py
from __future__ import annotations
from typing import Any, Callable, Optional

import logging
import os

import requests

from b_types.party_types import PartyFields
from utils.state import PlannerState

logger = logging.getLogger(__name__)

# --- Endpoints ----------------------------------------------------------------
BASE = os.getenv("PARTY_API_BASE", "https://fsa-crud-2aa9294fe819.herokuapp.com/api")
COHORT = os.getenv("PARTY_API_COHORT", "/2109-CPU-RM-WEB-PT")
API = BASE.rstrip("/") + COHORT


def _timeout() -> float:
    try:
        return float(os.getenv("PARTY_API_TIMEOUT", "15"))
    except ValueError:
        return 15.0


OnChange = Optional[Callable[[], None]]


# --- HTTP helpers -------------------------------------------------------------
def _http(method: str, path: str, **kwargs: Any) -> requests.Response:
    """One round trip, no retry. Raises on transport errors and 4xx/5xx."""
    r = requests.request(method, API + path, timeout=_timeout(), **kwargs)
    r.raise_for_status()
    return r


def _http_data(method: str, path: str, **kwargs: Any) -> Any:
    """Return the ``data`` member of the ``{"data": ...}`` envelope."""
    body = _http(method, path, **kwargs).json()
    if not isinstance(body, dict) or "data" not in body:
        raise ValueError(f"{method} {path}: response is not a data envelope")
    return body["data"]


def _fetch_list(path: str) -> Optional[list]:
    try:
        data = _http_data("GET", path)
        if not isinstance(data, list):
            raise ValueError(f"GET {path}: expected a list, got {type(data).__name__}")
        if not all(isinstance(x, dict) for x in data):
            raise ValueError(f"GET {path}: expected a list of objects")
        return data
    except (requests.RequestException, ValueError) as e:
        logger.error("GET %s failed: %s", API + path, e)
        return None


def _notify(on_change: OnChange) -> None:
    if on_change is not None:
        on_change()


# --- Reads --------------------------------------------------------------------
def get_parties(state: PlannerState, on_change: OnChange = None) -> bool:
    """Replace the party collection with GET /events."""
    parties = _fetch_list("/events")
    if parties is None:
        return False
    state.parties = parties
    _notify(on_change)
    return True


def get_party(state: PlannerState, party_id: int, on_change: OnChange = None) -> bool:
    """Replace the selected party with GET /events/{id}."""
    path = f"/events/{party_id}"
    try:
        party = _http_data("GET", path)
        if not isinstance(party, dict):
            raise ValueError(f"GET {path}: expected an object")
    except (requests.RequestException, ValueError) as e:
        logger.error("GET %s failed: %s", API + path, e)
        return False
    state.selected_party = party
    _notify(on_change)
    return True


def get_rsvps(state: PlannerState, on_change: OnChange = None) -> bool:
    rsvps = _fetch_list("/rsvps")
    if rsvps is None:
        return False
    state.rsvps = rsvps
    _notify(on_change)
    return True


def get_guests(state: PlannerState, on_change: OnChange = None) -> bool:
    guests = _fetch_list("/guests")
    if guests is None:
        return False
    state.guests = guests
    _notify(on_change)
    return True


# --- Writes -------------------------------------------------------------------
def delete_party(state: PlannerState, on_change: OnChange = None) -> bool:
    """
    DELETE the currently selected party, then clear the selection and refetch
    the party list. A failed DELETE leaves state untouched; an HTTP error
    status (4xx/5xx) counts as failed, so the party stays selected.
    """
    party_id = state.selected_id
    if party_id is None:
        return False
    path = f"/events/{party_id}"
    try:
        _http("DELETE", path)
    except requests.RequestException as e:
        logger.error("Error deleting party %s: %s", party_id, e)
        return False

    state.selected_party = None
    # get_parties notifies on success; otherwise the cleared selection still needs a render
    if not get_parties(state, on_change):
        _notify(on_change)
    return True


def save_party(state: PlannerState, fields: PartyFields, on_change: OnChange = None) -> bool:
    """
    Update the selected party (PUT) or, with nothing selected, create one (POST).
    The returned party becomes the selection and the list is refetched.
    """
    party_id = state.selected_id
    method, path = ("PUT", f"/events/{party_id}") if party_id is not None else ("POST", "/events")
    try:
        party = _http_data(method, path, json=dict(fields))
        if not isinstance(party, dict):
            raise ValueError(f"{method} {path}: expected an object")
    except (requests.RequestException, ValueError) as e:
        logger.error("%s %s failed: %s", method, API + path, e)
        return False

    state.selected_party = party
    if not get_parties(state, on_change):
        _notify(on_change)
    return True


# --- Init ---------------------------------------------------------------------
def load_initial_data(state: PlannerState) -> None:
    """Parties, then RSVPs, then guests; each finishes before the next starts."""
    get_parties(state)
    get_rsvps(state)
    get_guests(state)
    state.loaded = True
    logger.info(
        "Loaded %d parties, %d rsvps, %d guests",
        len(state.parties), len(state.rsvps), len(state.guests),
    )
