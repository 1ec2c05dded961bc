import pytest
import requests
from unittest.mock import Mock


@pytest.fixture(autouse=True)
def no_network_calls(monkeypatch):
    """Block all external requests (safety)."""
    def blocked(*a, **kw):
        raise RuntimeError("NETWORK CALL BLOCKED IN TEST")

    monkeypatch.setattr("requests.post", blocked)
    monkeypatch.setattr("requests.get", blocked)
    yield


def make_response(text="", status_code=200):
    """Fake requests.Response carrying a plain-text body."""
    resp = Mock()
    resp.text = text
    resp.status_code = status_code
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=resp
        )
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def response():
    return make_response
