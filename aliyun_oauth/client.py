"""
OAuth 1.0a client for the Aliyun account service.

Every call is a signed GET: the base oauth parameters are merged with the
call's own parameters, normalized, signed with HMAC-SHA1 and sent in the
Authorization header. Responses are either form-encoded or JSON.
"""

import json
import logging
from typing import Any, Callable, Dict, NamedTuple, Optional
from urllib.parse import parse_qsl

import requests

from .constants import (
    ACCESS_TOKEN_PATH,
    AUTHORIZE_PATH,
    BASE_PARAMS,
    CHECK_PATH,
    DEFAULT_CONFIG,
    FORM_CONTENT_TYPE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HTTP_METHOD,
    KEY_PAIR_PATH,
    LOAD_PATH,
    OAUTH_PREFIX,
    OAUTH_VERSION,
    REQUEST_TOKEN_PATH,
    SIGNATURE_METHOD,
    TIMESTAMP_PATH,
)
from .exceptions import (
    ApiError,
    CallerError,
    ConfigurationError,
    ParseError,
    TransportError,
)
from .signature import sign
from .utils import (
    ParamValue,
    build_auth,
    create_nonce,
    create_timestamp,
    encode,
    normalize,
)

logger = logging.getLogger(__name__)


class Credentials(NamedTuple):
    """Consumer key and secret identifying the calling application."""
    consumer_key: str
    consumer_secret: str


class OAuthClient:
    """
    Client for the Aliyun account OAuth 1.0a endpoints.

    The client keeps no per-call state beyond its credentials and config.
    Calls share one requests.Session, which is not guaranteed to be
    thread-safe: give each thread its own client or session. Token
    persistence is left to the caller.
    """

    def __init__(self, consumer_key: str, consumer_secret: str,
                 session: Optional[requests.Session] = None,
                 nonce: Optional[Callable[[], str]] = None,
                 **config):
        """
        Initialize OAuth client.

        Args:
            consumer_key: Application key
            consumer_secret: Application secret
            session: HTTP session to send requests with (default: new Session)
            nonce: Zero-argument callable returning a unique nonce
            **config: Configuration options (prefix, timeout)
        """
        self.credentials = Credentials(consumer_key, consumer_secret)

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.nonce = nonce or create_nonce

    def _validate_config(self):
        """Validate client configuration."""
        if not self.credentials.consumer_key:
            raise ConfigurationError("consumer_key cannot be empty")

        if not self.credentials.consumer_secret:
            raise ConfigurationError("consumer_secret cannot be empty")

        timeout = self.config['timeout']
        parts = timeout if isinstance(timeout, tuple) else (timeout,)
        if isinstance(timeout, tuple) and len(timeout) != 2:
            raise ConfigurationError("timeout tuple must be (connect, read)")
        for part in parts:
            if part is None:
                continue
            if isinstance(part, bool) or not isinstance(part, (int, float)) or part <= 0:
                raise ConfigurationError(f"timeout must be positive or None: {timeout!r}")

        prefix = self.config['prefix']
        if not prefix.startswith(('http://', 'https://')) or not prefix.endswith('/'):
            raise ConfigurationError(
                f"prefix must be an http(s) URL ending with '/': {prefix!r}"
            )

    @property
    def prefix(self) -> str:
        """Base URL every endpoint path is appended to."""
        return self.config['prefix']

    def build_params(self) -> Dict[str, ParamValue]:
        """Fresh set of the five oauth parameters every request carries."""
        return {
            'oauth_consumer_key': self.credentials.consumer_key,
            'oauth_nonce': self.nonce(),
            'oauth_timestamp': create_timestamp(),
            'oauth_signature_method': SIGNATURE_METHOD,
            'oauth_version': OAUTH_VERSION,
        }

    def _request(self, url: str, extra_params: Optional[Dict[str, ParamValue]] = None,
                 token_secret: Optional[str] = None) -> Any:
        """
        Sign and send a GET request, then decode the response.

        Args:
            url: Endpoint URL without query string
            extra_params: Call-specific parameters, signed along with the
                oauth parameters; non-oauth ones are sent as the query string
            token_secret: Secret of the request or access token, if any

        Returns:
            Decoded response (dict for form bodies, parsed JSON otherwise)

        Raises:
            CallerError: If the input is invalid
            TransportError: If the HTTP request fails
            ParseError: If the response body cannot be decoded
            ApiError: If the service reports an error
        """
        extra_params = extra_params or {}

        if '?' in url:
            raise CallerError(f"url must not carry a query string: {url}")

        collisions = sorted(set(extra_params) & set(BASE_PARAMS))
        if collisions:
            raise CallerError(f"parameters collide with oauth base parameters: {collisions}")

        if 'oauth_token' in extra_params and token_secret is None:
            raise CallerError("token_secret is required when oauth_token is sent")

        params = self.build_params()
        params.update(extra_params)

        normalized = normalize(params)
        signature = sign(url, HTTP_METHOD, normalized,
                         self.credentials.consumer_secret, token_secret)

        headers = {
            HEADER_AUTHORIZATION: build_auth(normalized + [('oauth_signature', encode(signature))])
        }

        query = '&'.join(
            f"{key}={value}" for key, value in normalized if OAUTH_PREFIX not in key
        )
        target = f"{url}?{query}" if query else url

        response, body = self._send(target, headers)
        return self._parse_response(response, body)

    def _send(self, url: str, headers: Dict[str, str]):
        """Dispatch the GET request and read the full body."""
        logger.debug(f"Sending signed {HTTP_METHOD} request to {url}")
        try:
            response = self.session.request(
                HTTP_METHOD, url, headers=headers, timeout=self.config['timeout']
            )
            body = response.content
        except requests.RequestException as e:
            logger.error(f"HTTP request to {url} failed: {e}")
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug(f"Received {response.status_code} from {url} ({len(body)} bytes)")
        return response, body

    def _parse_response(self, response: requests.Response, body: bytes) -> Any:
        """
        Decode a response body by content type.

        Form-encoded bodies become a flat dict. Anything else is parsed as
        JSON, and a truthy errorCode in it raises ApiError.
        """
        content_type = response.headers.get(HEADER_CONTENT_TYPE) or ''

        if FORM_CONTENT_TYPE in content_type:
            try:
                text = body.decode('utf-8')
            except UnicodeDecodeError as e:
                raise ParseError(f"Invalid form-encoded response: {e}") from e
            return dict(parse_qsl(text, keep_blank_values=True))

        try:
            data = json.loads(body)
        except ValueError as e:
            raise ParseError(f"Invalid JSON response: {e}") from e

        if isinstance(data, dict) and data.get('errorCode'):
            logger.error(f"OpenAPI returned error {data['errorCode']}: {data.get('errorMsg')}")
            message = data.get('errorMsg') or str(data['errorCode'])
            raise ApiError(message, code=data['errorCode'], payload=data)

        return data

    def _url(self, path: str) -> str:
        """Absolute URL of an endpoint path."""
        return self.prefix + path

    def request_token(self, callback_url: str) -> Dict[str, str]:
        """
        Obtain an unauthorized request token.

        Args:
            callback_url: Where the service redirects after authorization

        Returns:
            Dict with oauth_token and oauth_token_secret
        """
        # The account service takes the callback pre-encoded, so it is
        # encoded once here and once more by normalize.
        return self._request(self._url(REQUEST_TOKEN_PATH),
                             {'oauth_callback': encode(callback_url)})

    def get_access_token(self, token: str, verifier: str, token_secret: str) -> Dict[str, str]:
        """
        Exchange an authorized request token for an access token.

        Args:
            token: Request token
            verifier: oauth_verifier from the authorization callback
            token_secret: Request token secret

        Returns:
            Dict with the access token and its secret
        """
        return self._request(self._url(ACCESS_TOKEN_PATH),
                             {'oauth_token': token, 'oauth_verifier': verifier},
                             token_secret)

    def get_authorize_url(self, token: str) -> str:
        """URL to send the user's browser to; no request is made."""
        return self._url(AUTHORIZE_PATH) + '?oauth_token=' + token

    def load(self, token: str, token_secret: str) -> Any:
        """Load the account profile bound to an access token."""
        return self._request(self._url(LOAD_PATH), {'oauth_token': token}, token_secret)

    def get_key_pair(self, token: str, token_secret: str) -> Any:
        """Fetch the AccessKey pair of the account."""
        return self._request(self._url(KEY_PAIR_PATH), {'oauth_token': token}, token_secret)

    def get_timestamp(self, token_secret: Optional[str] = None) -> Any:
        """Fetch the service clock; no token is needed."""
        return self._request(self._url(TIMESTAMP_PATH), token_secret=token_secret)

    def check(self, token: str, token_secret: str) -> Any:
        """Check that an access token is still valid."""
        return self._request(self._url(CHECK_PATH), {'oauth_token': token}, token_secret)

    def check_access_token_key_pair(self, token: str, token_secret: str,
                                    access_key_id: str) -> Any:
        """Check that an access token belongs to the account owning access_key_id."""
        return self._request(self._url(CHECK_PATH),
                             {'oauth_token': token, 'access_key_id': access_key_id},
                             token_secret)

    def close(self):
        """Close HTTP session if the client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
