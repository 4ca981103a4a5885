from __future__ import annotations
from datetime import date as _date
from typing import Optional, TypedDict, Union

class Party(TypedDict, total=False):
    id: int
    name: str
    description: str
    date: str           # e.g. "2023-10-01T00:00:00.000Z"
    location: str

class Guest(TypedDict, total=False):
    id: int
    name: str

class Rsvp(TypedDict, total=False):
    id: int
    guestId: int
    eventId: int

# Body sent on create/update
class PartyFields(TypedDict):
    name: str
    description: str
    date: str
    location: str

# Convenience: build the request body from form values
def make_party_fields(
    *,
    name: str,
    description: str,
    location: str,
    when: Optional[Union[_date, str]],
) -> PartyFields:
    if isinstance(when, _date):
        iso = f"{when.isoformat()[:10]}T00:00:00.000Z"
    else:
        iso = (when or "").strip()
    return PartyFields(
        name=(name or "").strip(),
        description=(description or "").strip(),
        date=iso,
        location=(location or "").strip(),
    )
