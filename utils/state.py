# state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

import streamlit as st

from b_types.party_types import Guest, Party, Rsvp

SESSION_KEY = "planner_state"


@dataclass
class PlannerState:
    """Everything the page is rendered from. One instance per browser session."""
    parties: List[Party] = field(default_factory=list)
    selected_party: Optional[Party] = None
    rsvps: List[Rsvp] = field(default_factory=list)
    guests: List[Guest] = field(default_factory=list)
    loaded: bool = False  # initial fetch sequence done

    @property
    def selected_id(self) -> Optional[int]:
        return (self.selected_party or {}).get("id")


def get_planner_state() -> PlannerState:
    """Fetch (or lazily create) this session's state from st.session_state."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = PlannerState()
    return st.session_state[SESSION_KEY]
