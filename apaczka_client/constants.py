"""
Constants for the Apaczka API client.
Values match the Apaczka REST API v2 signing scheme.
"""

# Remote endpoint and request signing
API_URL = "https://www.apaczka.pl/api/v2/"
SIGN_ALGORITHM = "sha256"

# Signed requests are valid for 30 minutes
EXPIRES_IN = 30 * 60

CONTENT_TYPE = "application/x-www-form-urlencoded"

# Default configuration values
DEFAULT_CONFIG = {
    'api_url': API_URL,
    'sign_algorithm': SIGN_ALGORITHM,
    'expires_in': EXPIRES_IN,   # seconds added to "now" for the expires field
    'timeout': 30,              # HTTP timeout in seconds
}
