"""HTTP constants for the Cachet API layer."""

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_NOT_FOUND = 404

# Request headers
TOKEN_HEADER = "X-Cachet-Token"
JSON_CONTENT_TYPE = "application/json"

# Redirects are followed for reads only; writes report the 3xx
REDIRECT_METHODS = frozenset({"GET"})

# Fixed failure messages
MESSAGE_AUTH_FAILED = "API Authentication is required and has failed"
MESSAGE_NOT_FOUND = "Requested resource not found"

# Separators used when flattening an errors[] body
ERROR_TITLE_SEPARATOR = ": "
ERROR_JOIN_SEPARATOR = "; "

# Envelope keys
ENVELOPE_DATA_KEY = "data"
ENVELOPE_ERRORS_KEY = "errors"

# Utility endpoints
PING_PATH = "/ping"
VERSION_PATH = "/version"
