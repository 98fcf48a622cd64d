"""
Streamlit page tests using the AppTest harness.
"""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

UI_PATH = Path(__file__).resolve().parent.parent / "src" / "wedding_budget" / "ui" / "app_streamlit.py"


@pytest.fixture
def page():
    at = AppTest.from_file(str(UI_PATH), default_timeout=30)
    at.run()
    assert not at.exception, f"Page raised: {at.exception}"
    return at


def _markdown_text(at) -> str:
    return "\n".join(m.value for m in at.markdown)


def test_default_page_shows_example_total(page):
    assert "$21,200" in _markdown_text(page)
    assert "for 120 guests" in _markdown_text(page)
    assert [m.value for m in page.metric] == ["$177", "$10,200"]


def test_guest_field_shows_range_and_step(page):
    field = page.text_input(key="guest_count")
    assert field.label == "Guest Count"
    assert "10-500" in field.help
    assert "steps of 5" in field.help


def test_unparseable_guest_count_defaults_to_zero(page):
    page.text_input(key="guest_count").input("abc").run()

    assert not page.exception
    text = _markdown_text(page)
    assert "for 0 guests" in text
    assert "$11,000" in text
    assert [m.value for m in page.metric] == ["$0", "$0"]
    assert any("steps of 5" in c.value for c in page.caption)


def test_page_avoids_deprecated_width_flag():
    assert "use_container_width" not in UI_PATH.read_text(encoding="utf-8")
