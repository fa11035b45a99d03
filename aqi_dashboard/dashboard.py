import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .aggregations import (
    category_distribution,
    category_pollutant_means,
    category_proportions,
    country_pollutant_means,
    hazardous_city_totals,
    pollutant_composition,
    top_n_counts,
)
from .config import ALL, TOP_N
from .filtering import apply_selection
from .records import normalize_category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    records: pd.DataFrame
    top_countries: pd.DataFrame
    categories: pd.DataFrame
    proportions: pd.DataFrame
    country_means: pd.DataFrame
    composition: pd.DataFrame
    category_means: pd.DataFrame
    hazardous_cities: Optional[pd.DataFrame]

    @property
    def countries(self):
        return self.top_countries["country"].tolist()


def recompute(store, selection, n=TOP_N):
    """Filter the store once and build every chart summary from the result.

    The country ranking is computed a single time and handed to each
    aggregator that needs it, so all country charts show the same set.
    """
    filtered = apply_selection(store.frame, selection)
    ranking = top_n_counts(filtered, "country", n)
    countries = ranking["country"].tolist()

    country_means = country_pollutant_means(filtered, countries)
    summary = DashboardSummary(
        records=filtered,
        top_countries=ranking,
        categories=category_distribution(filtered),
        proportions=category_proportions(filtered, countries),
        country_means=country_means,
        composition=pollutant_composition(country_means),
        category_means=category_pollutant_means(filtered),
        hazardous_cities=hazardous_city_totals(filtered, n),
    )
    logger.debug(
        "Recomputed dashboard for country=%s category=%s: %d rows, %d countries",
        selection.country,
        selection.category,
        len(filtered),
        len(countries),
    )
    return summary


# -----------------------------------------------------------------------------
# EVENT HANDLERS
# -----------------------------------------------------------------------------
def on_country_changed(selection, country, store):
    if not country or country == ALL:
        return selection.with_country(ALL)
    if country not in store.countries():
        logger.warning("Unknown country %r, showing all countries", country)
        return selection.with_country(ALL)
    return selection.with_country(country)


def on_category_clicked(selection, category, store):
    key = normalize_category(category)
    if key != ALL and key not in store.categories():
        logger.warning("Unknown AQI category %r, clearing category filter", category)
        return selection.clear_category()
    return selection.toggle_category(key)
