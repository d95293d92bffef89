"""Constants for the Environment Agency flood-monitoring API adapter.

API Documentation: https://environment.data.gov.uk/flood-monitoring/doc/reference

No authentication required.
"""

FLOOD_API_BASE_URL = "https://environment.data.gov.uk/flood-monitoring"
STATIONS_PATH = "/id/stations"  # GET /id/stations?..., GET /id/stations/{notation}

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Station status values are URIs ending in e.g. "statusActive"
STATUS_PREFIX = "status"

# Station fields kept as opaque attributes
PASSTHROUGH_FIELDS = (
    "gridReference",
    "town",
    "stationReference",
    "RLOIid",
    "dateOpened",
    "wiskiID",
)
