"""
Shared fixtures for the OAuth client tests.
"""

from unittest.mock import Mock

import pytest
import requests

from aliyun_oauth import OAuthClient


def make_response(body, content_type="application/json", status_code=200):
    """Build a requests.Response with a buffered body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    if content_type is not None:
        response.headers["Content-Type"] = content_type
    return response


@pytest.fixture
def session():
    """Mocked transport answering every request with an empty JSON object."""
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response("{}")
    return session


@pytest.fixture
def client(session):
    """Client with a fixed nonce and a mocked session."""
    return OAuthClient("test-consumer-key", "test-consumer-secret",
                       session=session, nonce=lambda: "test-nonce")
