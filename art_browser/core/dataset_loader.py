from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .dataset import Dataset
from .exceptions import DatasetLoadError, DatasetSchemaError
from .records import REQUIRED_COLUMNS, Record, normalize_row

logger = logging.getLogger(__name__)


def _read_table(path: Path, delimiter: str) -> pd.DataFrame:
    """
    Read the raw table with every cell as text.

    keep_default_na=False stops pandas turning "" / "NA" / "None" into NaN,
    so blank cells reach normalize_row as empty strings.
    """
    try:
        return pd.read_csv(
            path,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as e:
        raise DatasetSchemaError(f"Dataset file {path} is empty (no header row)") from e
    except pd.errors.ParserError as e:
        raise DatasetLoadError(f"Could not parse dataset file {path}: {e}") from e
    except OSError as e:
        raise DatasetLoadError(f"Could not read dataset file {path}: {e}") from e


def _validate_columns(df: pd.DataFrame, path: Path) -> None:
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        msg = f"Dataset file {path} is missing required column(s): {', '.join(missing)}"
        logger.error(msg, extra={"path": str(path), "columns": list(df.columns)})
        raise DatasetSchemaError(msg)


def load_dataset(
    path: Path | str,
    name: Optional[str] = None,
    delimiter: str = ",",
) -> Dataset:
    """
    Load the public art CSV into a Dataset.

    Rows keep their file order. Blank Neighbourhood/Type cells become
    "Unknown"; years and geo points are kept as text and interpreted later.

    :param path: path to the delimited file (header row required)
    :param name: display name, defaults to the file stem
    :param delimiter: field separator
    :return: the loaded Dataset
    :raises DatasetLoadError: if the file is missing or unreadable
    :raises DatasetSchemaError: if required columns are missing
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(f"Dataset file not found at {path}")

    df = _read_table(path, delimiter)
    _validate_columns(df, path)

    records: List[Record] = [normalize_row(row) for row in df.to_dict("records")]
    dataset = Dataset(name=name or path.stem, records=records, file_path=path)

    logger.info(
        "Dataset loaded",
        extra={
            "dataset": dataset.name,
            "path": str(path),
            "n_records": len(dataset),
            "decades": dataset.decades(),
        },
    )
    return dataset
