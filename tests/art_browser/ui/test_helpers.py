from art_browser.core.dataset import Dataset
from art_browser.core.records import Record
from art_browser.ui.helpers import dataset_summary_text, get_decade_options


def _make_dataset() -> Dataset:
    records = [
        Record(neighbourhood="Downtown", year_of_installation="2004", geo_point_2d="49.28,-123.12"),
        Record(neighbourhood="Kitsilano", year_of_installation=None, geo_point_2d="not a point"),
        Record(neighbourhood="Downtown", year_of_installation="1991", geo_point_2d=None),
    ]
    return Dataset(name="HelperDataset", records=records)


def test_decade_options_start_with_all_then_observed_decades():
    options = get_decade_options(_make_dataset())

    assert options == [
        {"label": "All", "value": "All"},
        {"label": "1990s", "value": "1990s"},
        {"label": "2000s", "value": "2000s"},
        {"label": "Unknown", "value": "Unknown"},
    ]


def test_decade_options_for_empty_dataset_is_just_all():
    assert get_decade_options(Dataset(name="Empty", records=[])) == [{"label": "All", "value": "All"}]


def test_summary_counts_only_located_records():
    assert dataset_summary_text(_make_dataset()) == "3 artworks · 1 on the map"
