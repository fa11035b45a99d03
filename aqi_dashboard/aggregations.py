"""Per-chart aggregations over a filtered record frame.

Every function here is pure: it reads a frame produced by the filter step
and returns a new DataFrame shaped for one chart. Ties in any ranking keep
the order in which keys first appear in the data.
"""

import pandas as pd

from .config import CATEGORY_ORDER, HAZARDOUS, POLLUTANT_LABELS, POLLUTANTS, TOP_N
from .records import category_label, normalize_category

PERCENT_COLUMNS = [f"{pollutant}_pct" for pollutant in POLLUTANTS]


def _ordered_categories(keys):
    known = [category for category in CATEGORY_ORDER if category in keys]
    return known + sorted(set(keys) - set(CATEGORY_ORDER))


def percent_share(part, total):
    # 0% instead of NaN when the denominator is 0
    return (part / total * 100).where(total > 0, 0.0)


# -----------------------------------------------------------------------------
# 1. RANKING (bar chart, shared Top-15 country set)
# -----------------------------------------------------------------------------
def top_n_counts(frame, key="country", n=TOP_N):
    counts = frame.groupby(key, sort=False).size().reset_index(name="count")
    counts = counts.sort_values("count", ascending=False, kind="stable")
    return counts.head(n).reset_index(drop=True)


def rank_countries(frame, n=TOP_N):
    return top_n_counts(frame, "country", n)["country"].tolist()


# -----------------------------------------------------------------------------
# 2. CATEGORY DISTRIBUTION (pie chart)
# -----------------------------------------------------------------------------
def category_distribution(frame):
    counts = frame["aqi_category"].map(normalize_category).value_counts(sort=False)
    order = _ordered_categories(list(counts.index))
    return pd.DataFrame(
        {
            "category": [category_label(category) for category in order],
            "count": [int(counts[category]) for category in order],
        },
        columns=["category", "count"],
    )


# -----------------------------------------------------------------------------
# 3. COUNTRY x CATEGORY PROPORTIONS (heatmap)
# -----------------------------------------------------------------------------
def category_proportions(frame, countries=None):
    """Share of each country's rows falling in each AQI category.

    Args:
        frame: Filtered records.
        countries: Ranked countries to include. Defaults to the Top-15 of
            ``frame``.

    Returns:
        A DataFrame indexed by country (in rank order) with one column per
        category display label. Countries with no rows are left out.
    """
    if countries is None:
        countries = rank_countries(frame)
    labels = [category_label(category) for category in CATEGORY_ORDER]

    subset = frame[frame["country"].isin(countries)]
    if subset.empty:
        return pd.DataFrame(columns=labels, index=pd.Index([], name="country"), dtype=float)

    categories = subset["aqi_category"].map(normalize_category)
    counts = pd.crosstab(subset["country"], categories)
    totals = subset.groupby("country").size()

    present = [country for country in countries if country in counts.index]
    counts = counts.reindex(index=present, columns=CATEGORY_ORDER, fill_value=0)
    proportions = counts.div(totals.reindex(present), axis=0).astype(float)

    proportions.columns = labels
    proportions.index.name = "country"
    return proportions


def proportions_long(proportions):
    long = proportions.reset_index().melt(
        id_vars="country", var_name="category", value_name="proportion"
    )
    return long


# -----------------------------------------------------------------------------
# 4. POLLUTANT MEANS (stacked bar, grouped bar)
# -----------------------------------------------------------------------------
def country_pollutant_means(frame, countries=None):
    """Average of each pollutant per ranked country, plus percentage shares."""
    if countries is None:
        countries = rank_countries(frame)
    columns = ["country"] + POLLUTANTS + ["total"] + PERCENT_COLUMNS

    subset = frame[frame["country"].isin(countries)]
    if subset.empty:
        return pd.DataFrame(columns=columns)

    means = subset[POLLUTANTS].fillna(0.0).groupby(subset["country"]).mean()
    means = means.reindex([country for country in countries if country in means.index])
    means["total"] = means[POLLUTANTS].sum(axis=1)
    for pollutant in POLLUTANTS:
        means[f"{pollutant}_pct"] = percent_share(means[pollutant], means["total"])

    means.index.name = "country"
    return means.reset_index()[columns]


def pollutant_composition(means):
    rows = []
    for record in means.to_dict("records"):
        for pollutant in POLLUTANTS:
            rows.append(
                {
                    "country": record["country"],
                    "pollutant": pollutant,
                    "label": POLLUTANT_LABELS[pollutant],
                    "value": record[pollutant],
                    "percentage": record[f"{pollutant}_pct"],
                }
            )
    return pd.DataFrame(rows, columns=["country", "pollutant", "label", "value", "percentage"])


def category_pollutant_means(frame):
    columns = ["category"] + POLLUTANTS
    if frame.empty:
        return pd.DataFrame(columns=columns)

    categories = frame["aqi_category"].map(normalize_category)
    means = frame[POLLUTANTS].fillna(0.0).groupby(categories).mean()
    means = means.reindex(_ordered_categories(list(means.index)))
    means.insert(0, "category", [category_label(category) for category in means.index])
    return means.reset_index(drop=True)[columns]


# -----------------------------------------------------------------------------
# 5. HAZARDOUS CITIES (horizontal bar)
# -----------------------------------------------------------------------------
def hazardous_city_totals(frame, n=TOP_N):
    """Summed pollutant levels of the worst hazardous cities.

    Cities are keyed by ``(city, country)``. Returns None when the frame has no
    hazardous rows, so callers can show a "no data" state instead of a chart.
    """
    hazardous = frame[frame["aqi_category"].map(normalize_category) == HAZARDOUS]
    if hazardous.empty:
        return None

    totals = (
        hazardous[POLLUTANTS]
        .fillna(0.0)
        .groupby([hazardous["city"], hazardous["country"]], sort=False)
        .sum()
        .reset_index()
    )
    totals["total"] = totals[POLLUTANTS].sum(axis=1)
    totals.insert(0, "label", totals["city"] + " (" + totals["country"] + ")")

    totals = totals.sort_values("total", ascending=False, kind="stable")
    return totals.head(n).reset_index(drop=True)
