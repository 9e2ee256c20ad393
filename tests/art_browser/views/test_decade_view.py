from art_browser.core.dataset import Dataset
from art_browser.core.records import Record
from art_browser.core.view_state import ViewState
from art_browser.views.decade_view import DecadeView


def _make_dataset_for_decades() -> Dataset:
    years = ["2009", "1972", "", "2001", "1975", "unknown", "2019", None]
    return Dataset(
        name="DecadeDataset",
        records=[Record(year_of_installation=y) for y in years],
    )


def test_decade_compute_data_chronological_without_unknown():
    view = DecadeView(dataset=_make_dataset_for_decades())

    df = view.compute_data(ViewState(view_id="year"))

    assert list(df["key"]) == ["1970s", "2000s", "2010s"]
    assert list(df["count"]) == [2, 2, 1]


def test_decade_compute_data_filtered_to_unknown_is_empty():
    view = DecadeView(dataset=_make_dataset_for_decades())

    df = view.compute_data(ViewState(view_id="year", decade="Unknown"))

    assert df.empty


def test_decade_render_figure():
    view = DecadeView(dataset=_make_dataset_for_decades())
    state = ViewState(view_id="year")

    fig = view.render_figure(view.compute_data(state), state)

    assert fig.layout.title.text == "Public Art by Decade"
    assert list(fig.data[0].x) == ["1970s", "2000s", "2010s"]
