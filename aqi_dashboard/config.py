import os
from dataclasses import dataclass

# -----------------------------------------------------------------------------
# 1. FILTER SENTINELS & LIMITS
# -----------------------------------------------------------------------------
ALL = "all"
TOP_N = 15

# -----------------------------------------------------------------------------
# 2. POLLUTANTS
# -----------------------------------------------------------------------------
POLLUTANTS = ["co_aqi", "ozone_aqi", "no2_aqi", "pm25_aqi"]

POLLUTANT_LABELS = {
    "co_aqi": "Carbon Monoxide (CO)",
    "ozone_aqi": "Ozone (O₃)",
    "no2_aqi": "Nitrogen Dioxide (NO₂)",
    "pm25_aqi": "Particulate Matter (PM2.5)",
}

POLLUTANT_COLORS = {
    "co_aqi": "#4daf4a",
    "ozone_aqi": "#377eb8",
    "no2_aqi": "#ff7f00",
    "pm25_aqi": "#984ea3",
}

# -----------------------------------------------------------------------------
# 3. AQI CATEGORIES (severity order)
# -----------------------------------------------------------------------------
CATEGORY_ORDER = [
    "good",
    "moderate",
    "unhealthy for sensitive groups",
    "unhealthy",
    "very unhealthy",
    "hazardous",
]
HAZARDOUS = "hazardous"

# -----------------------------------------------------------------------------
# 4. CHART STYLE
# -----------------------------------------------------------------------------
BAR_COLOR = "#379683"
COUNTRY_LABEL_LENGTH = 12
CITY_LABEL_LENGTH = 16


@dataclass(frozen=True)
class Settings:
    data_path: str = "data/global_air_pollution_data.csv"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls):
        return cls(
            data_path=os.environ.get("AQI_DATA_PATH", cls.data_path),
            log_level=os.environ.get("AQI_LOG_LEVEL", cls.log_level).upper(),
        )
