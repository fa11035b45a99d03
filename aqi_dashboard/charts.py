"""Altair chart builders, one per dashboard summary."""

import altair as alt

from .aggregations import percent_share, proportions_long
from .config import (
    BAR_COLOR,
    CATEGORY_ORDER,
    CITY_LABEL_LENGTH,
    COUNTRY_LABEL_LENGTH,
    POLLUTANT_COLORS,
    POLLUTANT_LABELS,
    POLLUTANTS,
)
from .records import category_label

CATEGORY_LABELS = [category_label(category) for category in CATEGORY_ORDER]
POLLUTANT_NAMES = [POLLUTANT_LABELS[pollutant] for pollutant in POLLUTANTS]


def short_label_axis(max_length, **kwargs):
    """Axis whose tick labels are cut to ``max_length`` characters plus an ellipsis."""
    expr = (
        f"length(datum.label) > {max_length} "
        f"? slice(datum.label, 0, {max_length}) + '…' : datum.label"
    )
    return alt.Axis(labelExpr=expr, **kwargs)


def pollutant_color(field="label:N"):
    return alt.Color(
        field,
        title="Pollutant",
        sort=POLLUTANT_NAMES,
        scale=alt.Scale(
            domain=POLLUTANT_NAMES,
            range=[POLLUTANT_COLORS[pollutant] for pollutant in POLLUTANTS],
        ),
    )


def _with_pollutant_order(frame):
    return frame.assign(order=frame["pollutant"].map(POLLUTANTS.index))


# -----------------------------------------------------------------------------
# CHART 1: BAR (Top 15 Countries by Count)
# -----------------------------------------------------------------------------
def bar_chart(top_countries):
    return (
        alt.Chart(top_countries)
        .mark_bar(color=BAR_COLOR)
        .encode(
            x=alt.X(
                "country:N",
                sort=None,
                title="Countries",
                axis=short_label_axis(COUNTRY_LABEL_LENGTH, labelAngle=-45),
            ),
            y=alt.Y("count:Q", title="Number of Entries"),
            tooltip=[
                alt.Tooltip("country:N", title="Country"),
                alt.Tooltip("count:Q", title="Count"),
            ],
        )
        .properties(height=350, title="Top 15 Countries by Number of Entries")
    )


# -----------------------------------------------------------------------------
# CHART 2: PIE (AQI Categories)
# -----------------------------------------------------------------------------
def pie_chart(categories):
    data = categories.assign(order=range(len(categories)))
    return (
        alt.Chart(data)
        .mark_arc(stroke="white")
        .encode(
            theta=alt.Theta("count:Q"),
            color=alt.Color(
                "category:N",
                title="AQI Category",
                sort=CATEGORY_LABELS,
                scale=alt.Scale(scheme="set2", domain=CATEGORY_LABELS),
            ),
            order=alt.Order("order:Q"),
            tooltip=[
                alt.Tooltip("category:N", title="Category"),
                alt.Tooltip("count:Q", title="Count"),
            ],
        )
        .properties(height=350, title="AQI Category Distribution")
    )


# -----------------------------------------------------------------------------
# CHART 3: HEATMAP (Country x Category Proportions)
# -----------------------------------------------------------------------------
def heatmap(proportions):
    countries = proportions.index.tolist()
    base = alt.Chart(proportions_long(proportions)).encode(
        x=alt.X(
            "category:N",
            sort=CATEGORY_LABELS,
            title="AQI Categories",
            axis=alt.Axis(labelAngle=-30),
        ),
        y=alt.Y(
            "country:N",
            sort=countries,
            title="Countries",
            axis=short_label_axis(COUNTRY_LABEL_LENGTH),
        ),
    )

    cells = base.mark_rect(stroke="#fff", strokeWidth=1).encode(
        color=alt.Color(
            "proportion:Q",
            title="Proportion",
            scale=alt.Scale(scheme="blues", domain=[0, 1]),
            legend=alt.Legend(format=".0%"),
        ),
        tooltip=[
            alt.Tooltip("country:N", title="Country"),
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("proportion:Q", title="Proportion", format=".2%"),
        ],
    )

    # Dark cells get white text
    labels = base.mark_text(fontSize=10).encode(
        text=alt.Text("proportion:Q", format=".1%"),
        color=alt.condition(
            alt.datum.proportion > 0.5, alt.value("white"), alt.value("#333")
        ),
    )

    return (cells + labels).properties(
        height=450, title="AQI Category Proportions (Top 15 Countries)"
    )


# -----------------------------------------------------------------------------
# CHART 4: STACKED BAR (Pollutant Contributions per Country)
# -----------------------------------------------------------------------------
def stacked_bar_chart(composition):
    countries = list(dict.fromkeys(composition["country"]))
    return (
        alt.Chart(_with_pollutant_order(composition))
        .mark_bar()
        .encode(
            x=alt.X(
                "country:N",
                sort=countries,
                title="Countries",
                axis=short_label_axis(COUNTRY_LABEL_LENGTH, labelAngle=-45),
            ),
            y=alt.Y("value:Q", stack="zero", title="Average AQI Contribution"),
            color=pollutant_color(),
            order=alt.Order("order:Q"),
            tooltip=[
                alt.Tooltip("country:N", title="Country"),
                alt.Tooltip("label:N", title="Pollutant"),
                alt.Tooltip("value:Q", title="Value", format=".2f"),
                alt.Tooltip("percentage:Q", title="Percentage (%)", format=".2f"),
            ],
        )
        .properties(height=400, title="Average Pollutant Contribution by Country")
    )


# -----------------------------------------------------------------------------
# CHART 5: GROUPED BAR (Pollutants vs AQI Category)
# -----------------------------------------------------------------------------
def grouped_bar_chart(category_means):
    long = category_means.melt(
        id_vars="category", value_vars=POLLUTANTS, var_name="pollutant", value_name="value"
    )
    long["label"] = long["pollutant"].map(POLLUTANT_LABELS)

    return (
        alt.Chart(long)
        .mark_bar()
        .encode(
            x=alt.X(
                "category:N",
                sort=category_means["category"].tolist(),
                title="AQI Categories",
                axis=alt.Axis(labelAngle=-30),
            ),
            xOffset=alt.XOffset("label:N", sort=POLLUTANT_NAMES),
            y=alt.Y("value:Q", title="Average Pollutant Levels"),
            color=pollutant_color(),
            tooltip=[
                alt.Tooltip("label:N", title="Pollutant"),
                alt.Tooltip("category:N", title="AQI Category"),
                alt.Tooltip("value:Q", title="Value", format=".2f"),
            ],
        )
        .properties(height=400, title="Average Pollutant Levels by AQI Category")
    )


# -----------------------------------------------------------------------------
# CHART 6: HORIZONTAL BAR (Top 15 Hazardous Cities)
# -----------------------------------------------------------------------------
def horizontal_bar_chart(hazardous):
    if hazardous is None:
        return None

    long = hazardous.melt(
        id_vars=["label", "total"],
        value_vars=POLLUTANTS,
        var_name="pollutant",
        value_name="value",
    )
    long["percentage"] = percent_share(long["value"], long["total"])
    long["label_pollutant"] = long["pollutant"].map(POLLUTANT_LABELS)
    long = _with_pollutant_order(long)

    return (
        alt.Chart(long)
        .mark_bar()
        .encode(
            y=alt.Y(
                "label:N",
                sort=hazardous["label"].tolist(),
                title="Cities",
                axis=short_label_axis(CITY_LABEL_LENGTH),
            ),
            x=alt.X(
                "value:Q",
                stack="zero",
                title="Total Contribution to Hazardous AQI",
                axis=alt.Axis(format=".0f", tickCount=5),
            ),
            color=pollutant_color("label_pollutant:N"),
            order=alt.Order("order:Q"),
            tooltip=[
                alt.Tooltip("label:N", title="City"),
                alt.Tooltip("label_pollutant:N", title="Pollutant"),
                alt.Tooltip("value:Q", title="Value", format=".2f"),
                alt.Tooltip("percentage:Q", title="Percentage (%)", format=".2f"),
                alt.Tooltip("total:Q", title="Total Hazardous AQI", format=".2f"),
            ],
        )
        .properties(height=450, title="Top 15 Cities by Hazardous AQI Contribution")
    )
