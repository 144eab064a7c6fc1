"""
Constants for the Aliyun OAuth client library.
"""

# Account service endpoints (relative to the configured prefix)
REQUEST_TOKEN_PATH = "oauth/request_token"
ACCESS_TOKEN_PATH = "oauth/access_token"
AUTHORIZE_PATH = "oauth/authorize"
LOAD_PATH = "openapi/id/load"
KEY_PAIR_PATH = "openapi/id/aliyunid_kp"
TIMESTAMP_PATH = "openapi/util/timestamp"
CHECK_PATH = "openapi/id/check"

# OAuth 1.0a fixed values
SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
HTTP_METHOD = "GET"
OAUTH_PREFIX = "oauth_"

# Parameters every signed request carries
BASE_PARAMS = (
    "oauth_consumer_key",
    "oauth_nonce",
    "oauth_timestamp",
    "oauth_signature_method",
    "oauth_version",
)

# HTTP headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "content-type"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Default configuration values
DEFAULT_CONFIG = {
    'prefix': 'https://account.aliyun.com/',
    'timeout': 30,              # HTTP timeout in seconds
}
