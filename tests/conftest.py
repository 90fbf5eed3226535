import json
from pathlib import Path

import pytest

from fredclient.api.client import FredClient
from fredclient.config import FredSettings

FIXTURES = Path(__file__).resolve().parent / "fixtures"
API_KEY = "abcdefghijklmnopqrstuvwxyz012345"
BASE_URL = "https://api.stlouisfed.org/fred"


def load_fixture(name: str) -> dict:
    with open(FIXTURES / name, encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture
def settings():
    return FredSettings(api_key=API_KEY)


@pytest.fixture
def client(settings):
    c = FredClient(settings=settings)
    yield c
    c.close()
