"""Constants for the EFA HTTP adapter.

Uses the South Tyrol EFA installation (efa.sta.bz.it) with JSON output.
"""

EFA_BASE_URL = "https://efa.sta.bz.it/apb"
TRIP_ENDPOINT = "XML_TRIP_REQUEST2"
STOP_FINDER_ENDPOINT = "XML_STOPFINDER_REQUEST"
DEPARTURE_MONITOR_ENDPOINT = "XML_DM_REQUEST"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# EPSG code of WGS84, used in coordinate stop-finder requests
WGS84_EPSG = 4326
