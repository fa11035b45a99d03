"""Record store for the global air pollution dataset.

The store parses the CSV once, coerces the pollutant columns to numbers and
keeps the result as a fixed-column DataFrame that the rest of the pipeline
only ever reads.
"""

import logging
import math
import string
from dataclasses import asdict, dataclass

import pandas as pd

from .config import CATEGORY_ORDER, POLLUTANTS

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ["country", "city", "aqi_category"]
COLUMNS = TEXT_COLUMNS + POLLUTANTS


class DatasetError(ValueError):
    """Raised when a table cannot be turned into a record store."""


def normalize_category(value):
    """Lowercase an AQI category and collapse its whitespace."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return " ".join(str(value).split()).lower()


def category_label(value):
    # "unhealthy for sensitive groups" -> "Unhealthy For Sensitive Groups"
    return string.capwords(normalize_category(value))


def to_measurements(values):
    """Parse a column of measurements; non-numeric and non-finite values count as 0."""
    numbers = pd.to_numeric(values, errors="coerce").astype(float)
    return numbers.replace([math.inf, -math.inf], 0.0).fillna(0.0)


@dataclass(frozen=True)
class RowRecord:
    country: str
    city: str
    aqi_category: str
    co_aqi: float = 0.0
    ozone_aqi: float = 0.0
    no2_aqi: float = 0.0
    pm25_aqi: float = 0.0


def prepare_frame(raw):
    """Clean a raw table into the store's column layout.

    Text columns are stripped, categories normalized and pollutant columns
    coerced to floats (missing columns become all-zero). Rows without a
    country or with a category outside the known set are dropped.
    """
    frame = raw.copy()
    frame.columns = [str(column).strip() for column in frame.columns]

    missing = [column for column in TEXT_COLUMNS if column not in frame.columns]
    if missing:
        raise DatasetError(f"Missing expected columns: {missing}")

    for column in ["country", "city"]:
        frame[column] = frame[column].fillna("").astype(str).str.strip()
    frame["aqi_category"] = frame["aqi_category"].map(normalize_category)

    for pollutant in POLLUTANTS:
        if pollutant not in frame.columns:
            logger.warning("Column %r not found, treating it as all zeros", pollutant)
            frame[pollutant] = 0.0
        frame[pollutant] = to_measurements(frame[pollutant])

    malformed = (frame["country"] == "") | ~frame["aqi_category"].isin(CATEGORY_ORDER)
    if malformed.any():
        logger.warning(
            "Skipping %d malformed rows (missing country or unknown AQI category)",
            int(malformed.sum()),
        )

    return frame.loc[~malformed, COLUMNS].reset_index(drop=True)


class RecordStore:
    """Ordered, read-only collection of row records backed by a DataFrame."""

    def __init__(self, raw):
        self._frame = prepare_frame(raw)

    @classmethod
    def from_csv(cls, path):
        # Everything is read as text; numbers are coerced in prepare_frame.
        raw = pd.read_csv(path, dtype=str, keep_default_na=False)
        logger.info("Read %d rows from %s", len(raw), path)
        store = cls(raw)
        logger.info("Record store holds %d rows", len(store))
        return store

    @classmethod
    def from_rows(cls, rows):
        records = [asdict(row) if isinstance(row, RowRecord) else dict(row) for row in rows]
        return cls(pd.DataFrame(records, columns=COLUMNS))

    @property
    def frame(self):
        return self._frame

    def __len__(self):
        return len(self._frame)

    def __iter__(self):
        for row in self._frame.itertuples(index=False):
            yield RowRecord(*row)

    def countries(self):
        return sorted(self._frame["country"].unique())

    def categories(self):
        present = set(self._frame["aqi_category"].unique())
        return [category for category in CATEGORY_ORDER if category in present]
