"""
Aliyun OAuth Client Library

A Python client library for the OAuth 1.0a endpoints of the Aliyun
account service (https://account.aliyun.com/).

Example usage:
    from aliyun_oauth import OAuthClient

    client = OAuthClient("consumer-key", "consumer-secret")
    tokens = client.request_token("https://example.com/callback")
    redirect_to = client.get_authorize_url(tokens["oauth_token"])
"""

from .client import Credentials, OAuthClient
from .exceptions import (
    OAuthClientError,
    TransportError,
    ParseError,
    ApiError,
    CallerError,
    ConfigurationError
)
from .signature import base_string, sign, signing_key
from .utils import build_auth, create_nonce, create_timestamp, encode, normalize, sha1
from .constants import DEFAULT_CONFIG

__version__ = "1.0.0"
__all__ = [
    "OAuthClient",
    "Credentials",
    "OAuthClientError",
    "TransportError",
    "ParseError",
    "ApiError",
    "CallerError",
    "ConfigurationError",
    "base_string",
    "sign",
    "signing_key",
    "build_auth",
    "create_nonce",
    "create_timestamp",
    "encode",
    "normalize",
    "sha1",
    "DEFAULT_CONFIG"
]
