"""Pytest fixtures shared across the dashboard tests."""

import pandas as pd
import pytest

from aqi_dashboard.records import RecordStore

SAMPLE_ROWS = [
    {"country": "India", "city": "Delhi", "aqi_category": "Hazardous",
     "co_aqi": "5", "ozone_aqi": "10", "no2_aqi": "20", "pm25_aqi": "400"},
    {"country": "India", "city": "Mumbai", "aqi_category": "Unhealthy",
     "co_aqi": "2", "ozone_aqi": "30", "no2_aqi": "10", "pm25_aqi": "160"},
    {"country": "India", "city": "Delhi", "aqi_category": "hazardous",
     "co_aqi": "7", "ozone_aqi": "12", "no2_aqi": "22", "pm25_aqi": "350"},
    {"country": "USA", "city": "Phoenix", "aqi_category": "Moderate",
     "co_aqi": "1", "ozone_aqi": "60", "no2_aqi": "5", "pm25_aqi": "40"},
    {"country": "USA", "city": "Denver", "aqi_category": "Good",
     "co_aqi": "1", "ozone_aqi": "40", "no2_aqi": "2", "pm25_aqi": "20"},
    {"country": "China", "city": "Beijing", "aqi_category": "Very Unhealthy",
     "co_aqi": "4", "ozone_aqi": "20", "no2_aqi": "30", "pm25_aqi": "250"},
    {"country": "China", "city": "Delhi", "aqi_category": "Hazardous",
     "co_aqi": "3", "ozone_aqi": "5", "no2_aqi": "8", "pm25_aqi": "320"},
    {"country": "USA", "city": "Phoenix", "aqi_category": "Unhealthy for Sensitive Groups",
     "co_aqi": "1", "ozone_aqi": "110", "no2_aqi": "3", "pm25_aqi": "90"},
    {"country": "Brazil", "city": "Sao Paulo", "aqi_category": "Good",
     "co_aqi": "", "ozone_aqi": "n/a", "no2_aqi": "4", "pm25_aqi": "30"},
]


@pytest.fixture
def sample_rows():
    return [dict(row) for row in SAMPLE_ROWS]


@pytest.fixture
def store(sample_rows):
    return RecordStore.from_rows(sample_rows)


@pytest.fixture
def frame(store):
    return store.frame


@pytest.fixture
def sample_csv(tmp_path, sample_rows):
    """Write the sample rows to a CSV with an extra, unused column."""
    path = tmp_path / "global_air_pollution_data.csv"
    raw = pd.DataFrame(sample_rows)
    raw.insert(3, "aqi_value", range(len(raw)))
    raw.to_csv(path, index=False)
    return path
