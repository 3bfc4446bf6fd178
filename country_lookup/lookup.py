import logging
from typing import List, Protocol

from country_lookup.errors import InvalidRequest
from country_lookup.models import Country, RawCountry
from country_lookup.normalizers import Normalizer, get_default_normalizer
from country_lookup.store import KeyValueStore

log = logging.getLogger(__name__)


class CountrySource(Protocol):
    def fetch_by_name(self, name: str) -> List[RawCountry]:
        ...


class CountryLookup:
    """
    Per-request protocol: validate -> cache check -> upstream fetch ->
    normalize -> populate cache.

    Holds no per-request state, so one instance serves all request threads.
    The check-then-populate sequence is NOT atomic: concurrent misses for the
    same name each go upstream and each write the cache (last writer wins).
    """
    def __init__(self, store: KeyValueStore, source: CountrySource, normalizer: Normalizer | None = None):
        self.store = store
        self.source = source
        self.normalizer = normalizer or get_default_normalizer()

    def resolve(self, name: str) -> Country:
        """
        Resolve `name` to a Country.

        Raises one of the LookupFailure subclasses:
          InvalidRequest, CountryNotFound,
          UpstreamUnavailable, UpstreamInvalidResponse
        """
        if not name:
            raise InvalidRequest("name query param is required")

        cached, found = self.store.get(name)
        if found:
            log.debug("cache hit: name=%s", name)
            return cached

        log.debug("cache miss: name=%s", name)
        candidates = self.source.fetch_by_name(name)
        country = self.normalizer.normalize(candidates, name)

        self.store.set(name, country)
        log.info("cached country: key=%s name=%s", name, country.name)
        return country
