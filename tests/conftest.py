import json

import pytest
import requests


def build_response(status_code=200, body=b"", headers=None, encoding="utf-8"):
    """Build a real requests.Response carrying a canned body."""
    response = requests.Response()
    response.status_code = status_code
    if not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")
    response._content = body
    response.encoding = encoding
    if headers:
        response.headers.update(headers)
    return response


@pytest.fixture
def make_response():
    return build_response
