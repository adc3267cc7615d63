"""Constants for the SNCF API adapter.

The SNCF API is a Navitia instance restricted to the "sncf" coverage.
Authentication: the API key is the basic-auth username, the password is empty.
"""

# Coverage base URL
SNCF_API_BASE_URL = "https://api.sncf.com/v1/coverage/sncf"

# Endpoint paths, relative to the coverage base URL
PLACES_PATH = "places"  # GET places?q=...
JOURNEYS_PATH = "journeys"  # GET journeys?from=...&to=...
VEHICLE_JOURNEYS_PATH = "vehicle_journeys"  # GET vehicle_journeys/{id}

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Number of characters of an error body kept in error messages
ERROR_BODY_EXCERPT_LENGTH = 200
