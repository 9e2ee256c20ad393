import pandas as pd

from art_browser.core.dataset import Dataset
from art_browser.core.records import Record
from art_browser.core.view_state import ViewState
from art_browser.views.neighbourhood_view import NeighbourhoodView
from art_browser.views.type_view import TypeView


def _make_dataset_for_categories() -> Dataset:
    """
    6 records:
    - neighbourhoods: Downtown x3, West End x2, Unknown x1
    - types: Sculpture x4, Mural x2
    """
    records = [
        Record(neighbourhood="West End", art_type="Mural", year_of_installation="1972"),
        Record(neighbourhood="Downtown", art_type="Sculpture", year_of_installation="2009"),
        Record(neighbourhood="Downtown", art_type="Sculpture", year_of_installation="2009"),
        Record(neighbourhood="Unknown", art_type="Mural", year_of_installation=None),
        Record(neighbourhood="West End", art_type="Sculpture", year_of_installation="2009"),
        Record(neighbourhood="Downtown", art_type="Sculpture", year_of_installation="1998"),
    ]
    return Dataset(name="CategoryDataset", records=records)


def test_neighbourhood_compute_data_ranked():
    view = NeighbourhoodView(dataset=_make_dataset_for_categories())

    df = view.compute_data(ViewState())

    assert isinstance(df, pd.DataFrame)
    assert list(df["key"]) == ["Downtown", "West End", "Unknown"]
    assert list(df["count"]) == [3, 2, 1]


def test_neighbourhood_compute_data_with_filter():
    view = NeighbourhoodView(dataset=_make_dataset_for_categories())

    df = view.compute_data(ViewState(decade="2000s"))

    assert list(df["key"]) == ["Downtown", "West End"]
    assert list(df["count"]) == [2, 1]


def test_type_compute_data_ranked():
    view = TypeView(dataset=_make_dataset_for_categories())

    df = view.compute_data(ViewState(view_id="type"))

    assert list(df["key"]) == ["Sculpture", "Mural"]
    assert list(df["count"]) == [4, 2]


def test_type_render_figure_title():
    view = TypeView(dataset=_make_dataset_for_categories())
    state = ViewState(view_id="type")

    fig = view.render_figure(view.compute_data(state), state)

    assert fig.layout.title.text == "Public Art by Type"
    assert fig.layout.xaxis.title.text == "Type"


def test_unknown_decade_filter_includes_undated_records():
    view = NeighbourhoodView(dataset=_make_dataset_for_categories())

    df = view.compute_data(ViewState(decade="Unknown"))

    assert list(df["key"]) == ["Unknown"]
