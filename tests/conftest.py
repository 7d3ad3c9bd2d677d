import json
from pathlib import Path

import httpx
import pytest

from gocardless_client import AuthenticatedClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BASE_URL = "https://api.example.test"
ACCESS_TOKEN = "sandbox_token"


def _read_fixture(name):
    return json.loads((FIXTURES_DIR / name).read_text())


@pytest.fixture
def load_fixture():
    """Parsed JSON body from tests/fixtures"""
    return _read_fixture


@pytest.fixture
def sent_requests():
    """Requests seen by the mock transport, in order"""
    return []


@pytest.fixture
def make_client(sent_requests):
    """Build a client whose requests are answered by ``handler`` instead of the network."""

    def _make_client(handler, **kwargs):
        def _recording_handler(request):
            sent_requests.append(request)
            return handler(request)

        return AuthenticatedClient(
            base_url=BASE_URL,
            token=ACCESS_TOKEN,
            httpx_args={"transport": httpx.MockTransport(_recording_handler)},
            **kwargs,
        )

    return _make_client
