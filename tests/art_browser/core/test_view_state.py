import pytest

from art_browser.core.filtering import ALL_DECADES
from art_browser.core.view_state import MAP_VIEW, NEIGHBOURHOOD_VIEW, ViewState


def test_view_state_defaults():
    state = ViewState()

    assert state.view_id == NEIGHBOURHOOD_VIEW
    assert state.decade == ALL_DECADES


def test_view_state_to_from_dict_roundtrip():
    st = ViewState(view_id=MAP_VIEW, decade="1990s")

    assert ViewState.from_dict(st.to_dict()) == st


def test_view_state_from_empty_dict_is_default():
    assert ViewState.from_dict({}) == ViewState()
    assert ViewState.from_dict(None) == ViewState()


def test_view_state_rejects_unknown_view():
    with pytest.raises(ValueError, match="Unknown view"):
        ViewState(view_id="pie")


def test_transitions_return_new_state():
    st = ViewState()

    moved = st.with_view("type").with_decade("2000s")

    assert moved == ViewState(view_id="type", decade="2000s")
    assert st == ViewState()


def test_with_decade_none_clears_filter():
    st = ViewState(decade="1990s")

    assert st.with_decade(None).decade == ALL_DECADES


@pytest.mark.parametrize("decade", [["1990s"], 1990, {"d": "1990s"}])
def test_view_state_rejects_non_string_decade(decade):
    with pytest.raises(ValueError, match="Decade filter"):
        ViewState(decade=decade)
