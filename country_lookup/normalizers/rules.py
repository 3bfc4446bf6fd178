from typing import Sequence
from pydantic import ValidationError
from .base import Normalizer
from country_lookup.errors import CountryNotFound, MissingCapitalError, UpstreamInvalidResponse
from country_lookup.models import Country, RawCountry

class RuleNormalizer(Normalizer):
    """
    Rule-based normalizer:
    picks one candidate out of the upstream search results and
    flattens it into the canonical Country record.
    """
    def normalize(self, candidates: Sequence[RawCountry], query: str) -> Country:
        if not candidates:
            raise CountryNotFound()
        rc = select_candidate(candidates, query)
        try:
            return Country(
                name=rc.name.common,
                capital=first_capital(rc),
                currency_symbol=any_currency_symbol(rc),
                population=rc.population,
            )
        except ValidationError as e:
            raise UpstreamInvalidResponse(f"unusable record for {rc.name.common!r}: {e}") from e


# --- Individual selection / extraction helpers ---

def select_candidate(candidates: Sequence[RawCountry], query: str) -> RawCountry:
    """Exact (case-sensitive) match on the common name, else the first candidate."""
    for c in candidates:
        if c.name.common == query:
            return c
    return candidates[0]

def first_capital(rc: RawCountry) -> str:
    """First listed capital; an empty list is an upstream contract violation."""
    if not rc.capital:
        raise MissingCapitalError(rc.name.common)
    return rc.capital[0]

def any_currency_symbol(rc: RawCountry) -> str:
    """Symbol of whichever currency the mapping yields first; "" if none."""
    for cur in rc.currencies.values():
        return cur.symbol
    return ""
