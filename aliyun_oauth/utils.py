"""
Encoding and normalization helpers for OAuth 1.0a request signing.
"""

import base64
import hashlib
import hmac
import time
import uuid
from typing import Iterable, List, Mapping, Tuple, Union
from urllib.parse import quote

from .constants import OAUTH_PREFIX

ParamValue = Union[str, int]
NormalizedParams = List[Tuple[str, str]]


def encode(value: ParamValue) -> str:
    """
    Percent-encode a value the way OAuth 1.0a requires (RFC 3986).

    Only unreserved characters (ALPHA, DIGIT, "-", ".", "_", "~") are left
    as-is, so "!", "'", "(", ")" and "*" come out as %21, %27, %28, %29
    and %2A. Text is encoded as UTF-8 first.

    Args:
        value: String or number to encode

    Returns:
        Percent-encoded string
    """
    return quote(str(value), safe='')


def normalize(params: Union[Mapping[str, ParamValue],
                            Iterable[Tuple[str, ParamValue]]]) -> NormalizedParams:
    """
    Sort and encode a parameter bag into the canonical pair list.

    Pairs are ordered by key, then by value, comparing the raw strings by
    code point; both sides are percent-encoded once the order is fixed.

    Args:
        params: Mapping of parameter name to value, or an iterable of
            (name, value) pairs when a name repeats

    Returns:
        List of (encoded_key, encoded_value) tuples
    """
    items = params.items() if isinstance(params, Mapping) else params
    pairs = sorted((str(key), str(value)) for key, value in items)
    return [(encode(key), encode(value)) for key, value in pairs]


def build_auth(normalized: NormalizedParams) -> str:
    """Render the Authorization header value from normalized pairs."""
    fields = [
        f'{key}="{value}"'
        for key, value in normalized
        if OAUTH_PREFIX in key
    ]
    return 'OAuth ' + ', '.join(fields)


def sha1(text: str, key: str) -> str:
    """HMAC-SHA1 of text under key, base64 encoded."""
    mac = hmac.new(key.encode('utf-8'), text.encode('utf-8'), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode('ascii')


def create_timestamp() -> int:
    return int(time.time())


def create_nonce() -> str:
    return str(uuid.uuid4())
