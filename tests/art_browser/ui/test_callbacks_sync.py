import pytest
from dash import exceptions

from art_browser.config.model import GlobalConfig
from art_browser.core.dataset import Dataset
from art_browser.core.events import FilterChanged, ViewSelected
from art_browser.core.records import Record
from art_browser.core.view_state import ViewState
from art_browser.ui.callbacks.callbacks_sync import _apply_trigger, _status_text
from art_browser.ui.callbacks.callbacks_utils import event_from_trigger, safe_view_state
from art_browser.ui.config import AppConfig
from art_browser.ui.dash_app import build_view_registry
from art_browser.ui.ids import IDs, view_button_id


def _make_ctx(tmp_path) -> AppConfig:
    ds = Dataset(
        name="SyncDataset",
        records=[
            Record(neighbourhood="Downtown", year_of_installation="1995"),
            Record(neighbourhood="Downtown", year_of_installation="2001"),
            Record(neighbourhood="Kitsilano", year_of_installation="1999"),
        ],
    )
    global_config = GlobalConfig()
    return AppConfig(
        config_root=tmp_path,
        global_config=global_config,
        dataset=ds,
        registry=build_view_registry(global_config),
    )


def test_event_from_view_button():
    assert event_from_trigger(view_button_id("map"), "All") == ViewSelected("map")


def test_event_from_decade_dropdown():
    assert event_from_trigger(IDs.Control.DECADE_SELECT, "1990s") == FilterChanged("1990s")


def test_event_from_unknown_trigger():
    assert event_from_trigger(None, "1990s") is None
    assert event_from_trigger("something-else", "1990s") is None


def test_safe_view_state_falls_back_to_default():
    assert safe_view_state(None) == ViewState()
    assert safe_view_state("junk") == ViewState()
    assert safe_view_state({"view_id": "pie"}) == ViewState()
    assert safe_view_state({"view_id": "map", "decade": "1990s"}) == ViewState("map", "1990s")


def test_apply_trigger_view_button_keeps_decade(tmp_path):
    ctx = _make_ctx(tmp_path)

    new_state = _apply_trigger(ctx, view_button_id("year"), "1990s", {"view_id": "type", "decade": "2000s"})

    assert new_state == {"view_id": "year", "decade": "2000s"}


def test_apply_trigger_decade_change_keeps_view(tmp_path):
    ctx = _make_ctx(tmp_path)

    new_state = _apply_trigger(ctx, IDs.Control.DECADE_SELECT, "1990s", {"view_id": "map", "decade": "All"})

    assert new_state == {"view_id": "map", "decade": "1990s"}


def test_apply_trigger_without_event_prevents_update(tmp_path):
    ctx = _make_ctx(tmp_path)

    with pytest.raises(exceptions.PreventUpdate):
        _apply_trigger(ctx, None, "All", None)


def test_status_text_counts_visible_records(tmp_path):
    ctx = _make_ctx(tmp_path)

    parts = _status_text(ctx, {"view_id": "year", "decade": "1990s"})
    text = " ".join(p for p in parts if isinstance(p, str))

    assert "Decade" in text
    assert "1990s" in text
    assert "2 of 3 artworks" in text


def test_safe_view_state_resets_non_string_decade():
    assert safe_view_state({"view_id": "map", "decade": ["1990s"]}) == ViewState()


def test_status_text_with_corrupt_decade_uses_default_state(tmp_path):
    ctx = _make_ctx(tmp_path)

    parts = _status_text(ctx, {"view_id": "map", "decade": ["1990s"]})
    text = " ".join(p for p in parts if isinstance(p, str))

    assert "3 of 3 artworks" in text
