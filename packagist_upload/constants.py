"""
Constants for the Private Packagist upload client.
Compatible with the Private Packagist API request signature scheme.
"""

# Authorization header scheme token
AUTH_SCHEME = "PACKAGIST-HMAC-SHA256"

# HTTP headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_FILENAME = "X-FILENAME"

USER_AGENT = "python-private-packagist-upload (https://github.com/packagist/packagist-upload)"

DEFAULT_BASE_URL = "https://packagist.com"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_ZIP = "application/zip"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,      # HTTP timeout in seconds
    'nonce_bytes': 20,  # random bytes per cnonce (40 hex characters)
}

# Ports the signature host omits
DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}
