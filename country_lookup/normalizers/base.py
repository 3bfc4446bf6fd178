# country_lookup/normalizers/base.py
from typing import Protocol, Sequence
from country_lookup.models import Country, RawCountry

class Normalizer(Protocol):
    def normalize(self, candidates: Sequence[RawCountry], query: str) -> Country:
        """Collapse upstream candidates into ONE canonical record. Do not mutate inputs."""
        ...
