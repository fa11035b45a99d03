import altair as alt
import pytest

from aqi_dashboard import charts
from aqi_dashboard.dashboard import recompute
from aqi_dashboard.selection import Selection


@pytest.fixture
def summary(store):
    return recompute(store, Selection())


def _encoding(spec):
    if "encoding" in spec:
        return spec["encoding"]
    return spec["layer"][0]["encoding"]


def test_bar_chart(summary):
    spec = charts.bar_chart(summary.top_countries).to_dict()

    assert spec["mark"]["type"] == "bar"
    assert spec["mark"]["color"] == "#379683"
    assert spec["encoding"]["x"]["field"] == "country"
    assert "slice(datum.label, 0, 12)" in spec["encoding"]["x"]["axis"]["labelExpr"]


def test_pie_chart_keeps_category_colors_stable(summary):
    spec = charts.pie_chart(summary.categories).to_dict()

    assert spec["mark"]["type"] == "arc"
    assert spec["encoding"]["color"]["scale"]["domain"] == charts.CATEGORY_LABELS


def test_heatmap_layers_cells_and_labels(summary):
    spec = charts.heatmap(summary.proportions).to_dict()

    marks = [layer["mark"]["type"] for layer in spec["layer"]]
    assert marks == ["rect", "text"]
    assert _encoding(spec)["y"]["sort"] == summary.countries


def test_stacked_bar_chart(summary):
    spec = charts.stacked_bar_chart(summary.composition).to_dict()

    assert spec["encoding"]["y"]["stack"] == "zero"
    assert spec["encoding"]["color"]["scale"]["range"] == [
        "#4daf4a",
        "#377eb8",
        "#ff7f00",
        "#984ea3",
    ]


def test_grouped_bar_chart(summary):
    spec = charts.grouped_bar_chart(summary.category_means).to_dict()

    assert spec["encoding"]["xOffset"]["field"] == "label"
    assert spec["encoding"]["x"]["sort"][0] == "Good"


def test_horizontal_bar_chart(summary):
    chart = charts.horizontal_bar_chart(summary.hazardous_cities)

    assert isinstance(chart, alt.Chart)
    spec = chart.to_dict()
    assert spec["encoding"]["y"]["sort"] == ["Delhi (India)", "Delhi (China)"]
    assert "slice(datum.label, 0, 16)" in spec["encoding"]["y"]["axis"]["labelExpr"]


def test_horizontal_bar_chart_no_data():
    assert charts.horizontal_bar_chart(None) is None


def test_charts_accept_empty_summaries(store):
    summary = recompute(store, Selection(country="Brazil", category="hazardous"))

    charts.bar_chart(summary.top_countries).to_dict()
    charts.pie_chart(summary.categories).to_dict()
    charts.heatmap(summary.proportions).to_dict()
    charts.stacked_bar_chart(summary.composition).to_dict()
    charts.grouped_bar_chart(summary.category_means).to_dict()
