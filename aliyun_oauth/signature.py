"""
HMAC-SHA1 signature generation for OAuth 1.0a.

The signature base string is::

    METHOD&encode(url)&encode(k1=v1&k2=v2...)

where the parameter pairs are already normalized (sorted and encoded),
so the parameter block ends up encoded twice.
"""

from typing import Optional

from .utils import NormalizedParams, encode, sha1


def base_string(method: str, url: str, normalized: NormalizedParams) -> str:
    """
    Build the signature base string.

    Args:
        method: HTTP method (uppercased here)
        url: Request URL without query string
        normalized: Normalized parameter pairs, excluding oauth_signature

    Returns:
        The base string to sign
    """
    params = '&'.join(f"{key}={value}" for key, value in normalized)
    return '&'.join([method.upper(), encode(url), encode(params)])


def signing_key(consumer_secret: str, token_secret: Optional[str] = None) -> str:
    """Join the encoded consumer and token secrets with '&'."""
    return f"{encode(consumer_secret)}&{encode(token_secret or '')}"


def sign(url: str, method: str, normalized: NormalizedParams,
         consumer_secret: str, token_secret: Optional[str] = None) -> str:
    """
    Compute the oauth_signature for a request.

    The returned value is plain base64; it still has to be percent-encoded
    before it goes into the Authorization header.

    Args:
        url: Request URL without query string
        method: HTTP method
        normalized: Normalized parameter pairs, excluding oauth_signature
        consumer_secret: Application secret
        token_secret: Request or access token secret, if any

    Returns:
        Base64-encoded HMAC-SHA1 signature
    """
    return sha1(base_string(method, url, normalized),
                signing_key(consumer_secret, token_secret))
