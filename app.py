import logging

import streamlit as st

from aqi_dashboard import charts
from aqi_dashboard.config import ALL, Settings
from aqi_dashboard.dashboard import on_category_clicked, on_country_changed, recompute
from aqi_dashboard.records import DatasetError, RecordStore, category_label
from aqi_dashboard.selection import Selection

# -----------------------------------------------------------------------------
# 1. PAGE CONFIGURATION
# -----------------------------------------------------------------------------
st.set_page_config(
    page_title="Global Air Pollution Dashboard",
    page_icon="🌍",
    layout="wide",
    initial_sidebar_state="expanded",
)

settings = Settings.from_env()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# -----------------------------------------------------------------------------
# 2. DATA LOADING (Cached for Performance)
# -----------------------------------------------------------------------------
@st.cache_data
def load_store(path):
    try:
        return RecordStore.from_csv(path)
    except FileNotFoundError as e:
        st.error(f"File not found: {e}. Please set AQI_DATA_PATH to the dataset CSV.")
    except DatasetError as e:
        st.error(f"Could not read the dataset: {e}")
    return None


store = load_store(settings.data_path)

if store is None:
    st.stop()

if "selection" not in st.session_state:
    st.session_state.selection = Selection()


# -----------------------------------------------------------------------------
# 3. EVENT HANDLERS
# -----------------------------------------------------------------------------
def handle_country_change():
    st.session_state.selection = on_country_changed(
        st.session_state.selection, st.session_state.country_select, store
    )


def handle_category_click(category):
    st.session_state.selection = on_category_clicked(
        st.session_state.selection, category, store
    )


def handle_category_clear():
    st.session_state.selection = st.session_state.selection.clear_category()


# -----------------------------------------------------------------------------
# 4. SIDEBAR FILTERS
# -----------------------------------------------------------------------------
st.sidebar.title("Filters")

st.sidebar.selectbox(
    "Select Country:",
    [ALL] + store.countries(),
    format_func=lambda value: "All Countries" if value == ALL else value,
    key="country_select",
    on_change=handle_country_change,
)

st.sidebar.markdown("**AQI Category** (click again to clear)")
for category in store.categories():
    active = st.session_state.selection.category == category
    st.sidebar.button(
        category_label(category),
        key=f"category_{category.replace(' ', '_')}",
        on_click=handle_category_click,
        args=(category,),
        type="primary" if active else "secondary",
    )

st.sidebar.button(
    "Clear category filter",
    key="category_clear",
    on_click=handle_category_clear,
    disabled=st.session_state.selection.category == ALL,
)

st.sidebar.markdown("---")
st.sidebar.info(
    "**Global Air Pollution**\n\n"
    "AQI categories and pollutant sub-indices (CO, Ozone, NO₂, PM2.5) "
    "for cities around the world."
)


# -----------------------------------------------------------------------------
# 5. DASHBOARD
# -----------------------------------------------------------------------------
selection = st.session_state.selection
summary = recompute(store, selection)

st.title("Interactive Data Visualization for Global Air Pollution")
st.caption(
    f"Showing {len(summary.records):,} of {len(store):,} records"
    f" | Country: {'All' if selection.country == ALL else selection.country}"
    f" | Category: {category_label(selection.category)}"
)

if summary.records.empty:
    st.warning("No records match the current filters.")

row1 = st.columns(2)
with row1[0]:
    st.altair_chart(charts.bar_chart(summary.top_countries), use_container_width=True)
with row1[1]:
    st.altair_chart(charts.pie_chart(summary.categories), use_container_width=True)

row2 = st.columns(2)
with row2[0]:
    st.altair_chart(charts.heatmap(summary.proportions), use_container_width=True)
    with st.expander("How to Read This Heatmap"):
        st.markdown(
            """
            A darker cell indicates a *higher proportion* of that AQI category.

            If it's **Good** or **Moderate**, higher is better; if it's **Hazardous**,
            higher is worse.
            """
        )
with row2[1]:
    st.altair_chart(
        charts.stacked_bar_chart(summary.composition), use_container_width=True
    )

row3 = st.columns(2)
with row3[0]:
    st.altair_chart(
        charts.grouped_bar_chart(summary.category_means), use_container_width=True
    )
with row3[1]:
    hazardous_chart = charts.horizontal_bar_chart(summary.hazardous_cities)
    if hazardous_chart is None:
        st.subheader("Top 15 Cities by Hazardous AQI Contribution")
        st.info("No Hazardous AQI Data Available for This Filter")
    else:
        st.altair_chart(hazardous_chart, use_container_width=True)
