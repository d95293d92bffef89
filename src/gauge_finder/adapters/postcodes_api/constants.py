"""Constants for the postcodes.io geocoding adapter.

API Documentation: https://postcodes.io/docs

No authentication required.
"""

POSTCODES_API_BASE_URL = "https://api.postcodes.io"
POSTCODES_PATH = "/postcodes"  # GET /postcodes/{postcode}

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
