"""Provider status codes, display labels and sentinels for EFA payloads."""

# Status codes embedded in EFA message lists
AMBIGUOUS_LOCATION_CODES = frozenset({"-8011"})
STOP_NOT_FOUND_CODES = frozenset({"-3010", "-3011"})

# Display labels and sentinels
WALK_LABEL = "Fußweg"
TRANSIT_LABEL = "ÖPNV"
UNKNOWN_POINT_NAME = "N/A"
UNKNOWN_STATION_NAME = "Unbekannter Name"
UNKNOWN_LOCALITY = "Unbekannter Ort"
UNKNOWN_STATION_TYPE = "unknown"
UNKNOWN_LINE = "?"
UNKNOWN_DEPARTURE_FIELD = "N/A"
UNKNOWN_SERVICE_TYPE = "Unknown"
