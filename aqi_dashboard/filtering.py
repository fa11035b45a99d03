import pandas as pd

from .config import ALL
from .records import normalize_category


def filter_records(frame, country=ALL, category=ALL):
    """Return the rows matching the country and (case-insensitive) category.

    ``ALL`` disables either filter. A value that matches nothing gives an empty
    frame. The input frame is left untouched.
    """
    mask = pd.Series(True, index=frame.index)

    if country != ALL:
        mask &= frame["country"] == country

    category_key = normalize_category(category)
    if category_key != ALL:
        mask &= frame["aqi_category"].map(normalize_category) == category_key

    return frame.loc[mask].copy()


def apply_selection(frame, selection):
    return filter_records(frame, selection.country, selection.category)
