import json
import os
import sys

import pytest
import requests

from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from diffusion_to.client import DiffusionClient

RAW_IMAGE = "data:image/png;base64,QUJD"

def make_response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code

    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")

    return response

@pytest.fixture
def image_data():
    return {
        "id": 1234,
        "steps": 50,
        "size": "small",
        "model": "beauty_realism",
        "credits_used": 2,
        "created_at": "2024-01-01T00:00:00.000000Z",
        "updated_at": "2024-01-01T00:00:10.000000Z",
        "raw": RAW_IMAGE,
    }

@pytest.fixture
def session():
    session = requests.Session()
    session.post = mock.Mock()

    return session

@pytest.fixture
def client(session):
    return DiffusionClient("secret-key", endpoint="https://diffusion.test/", session=session)

@pytest.fixture
def respond():
    return make_response
