"""Default policy values for the Pasir Ris focus area and the NEA feeds."""

NEA_BASE_URL = "https://api.data.gov.sg/v1"
DEFAULT_USER_AGENT = "shoresquad-advisory/0.1.0"

DEFAULT_FOCUS_AREA_NAME = "Pasir Ris"

# Checked in order; the first area whose name contains one of these wins.
DEFAULT_AREA_SUBSTRINGS: list[str] = ["pasir ris", "east"]

# Changi first, then Pasir Ris.
DEFAULT_STATION_IDS: list[str] = ["S07", "S43"]

DEFAULT_TEMPERATURE_C = 28

# (keywords, adjustment) pairs, first match wins.
DEFAULT_CONDITION_RULES: list[tuple[list[str], int]] = [
    (["fair", "sunny"], 3),
    (["partly cloudy"], 2),
    (["cloudy"], 1),
    (["rain", "shower"], -3),
    (["thundery"], -5),
]

DEFAULT_INTERVAL_MINUTES = 30

FALLBACK_MESSAGE = "Check local weather!"
