# tests/conftest.py
import threading
import pytest
from fastapi.testclient import TestClient

from country_lookup.main import app
from country_lookup.lookup import CountryLookup
from country_lookup.models import RawCountry
from country_lookup.routers.search import get_lookup
from country_lookup.store import MemoryStore


def raw_country(common, capital=("Capital",), population=1, currencies=None):
    """Build an upstream record the way REST Countries would send it."""
    return RawCountry.model_validate({
        "name": {"common": common},
        "capital": list(capital),
        "population": population,
        "currencies": currencies if currencies is not None else {"XXX": {"symbol": "¤"}},
    })


INDIA_PAYLOAD = [
    {
        "name": {"common": "India"},
        "capital": ["New Delhi"],
        "population": 1400000000,
        "currencies": {"INR": {"symbol": "₹"}},
    }
]


class FakeSource:
    """
    Stand-in for RestCountriesClient.
    `responses` maps a name to a list of RawCountry or an exception to raise.
    Unknown names return [] (upstream "not found").
    """
    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self._lock = threading.Lock()

    def fetch_by_name(self, name):
        with self._lock:
            self.calls.append(name)
        out = self.responses.get(name, [])
        if isinstance(out, Exception):
            raise out
        return list(out)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def source():
    return FakeSource({"India": [RawCountry.model_validate(r) for r in INDIA_PAYLOAD]})


@pytest.fixture
def lookup(store, source):
    return CountryLookup(store=store, source=source)


# --- Override the app's lookup dependency to use our store + fake upstream ---
@pytest.fixture(autouse=True)
def override_get_lookup(lookup):
    app.dependency_overrides[get_lookup] = lambda: lookup
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
