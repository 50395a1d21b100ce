import logging
from unittest.mock import MagicMock

import pytest
import requests


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


def make_response(status_code=200, json_data=None, text=None, headers=None, reason="OK"):
    """Build a MagicMock standing in for a requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.headers = headers if headers is not None else {}
    if json_data is not None:
        response.json.return_value = json_data
        response.text = text if text is not None else str(json_data)
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ""
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def http_session():
    """A requests.Session mock; tests set get/post/request return values."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def sleeps():
    """Records the delays passed to the retry wrapper instead of sleeping."""
    return []
