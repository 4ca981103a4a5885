"""Smoke tests for the page, run headless through Streamlit's AppTest."""

from streamlit.testing.v1 import AppTest

from utils.helpers import SELECT_PROMPT

APP = "../streamlit_app.py"


def _markdown_text(at):
    return "\n".join(m.value for m in at.markdown)


def test_first_run_loads_and_renders(seeded_api):
    at = AppTest.from_file(APP, default_timeout=30).run()

    assert not at.exception
    assert "Party Planner" in at.title[0].value
    labels = [b.label for b in at.button]
    assert "Bash" in labels
    assert "Gala" in labels
    assert SELECT_PROMPT in _markdown_text(at)
    assert [c[1] for c in seeded_api.calls] == ["/events", "/rsvps", "/guests"]


def test_selecting_a_party_shows_its_guests(seeded_api):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="party-1").click().run()

    assert not at.exception
    text = _markdown_text(at)
    assert "Bash #1" in text
    assert "- Ada" in text
    assert "Grace" not in text
    assert ("GET", "/events/1", None) in seeded_api.calls


def test_failed_load_still_renders(fake_api):
    fake_api.fail("GET", "/events")
    fake_api.fail("GET", "/rsvps")
    fake_api.fail("GET", "/guests")
    at = AppTest.from_file(APP, default_timeout=30).run()

    assert not at.exception
    assert SELECT_PROMPT in _markdown_text(at)


def test_rerender_with_unchanged_state_is_identical(seeded_api):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.button(key="party-1").click().run()
    first = (_markdown_text(at), [b.label for b in at.button])
    calls = len(seeded_api.calls)

    at.run()

    assert not at.exception
    assert (_markdown_text(at), [b.label for b in at.button]) == first
    assert len(seeded_api.calls) == calls
