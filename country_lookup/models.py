from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

# -----------------------------
# Canonical record returned to clients (and memoized in the store)
# -----------------------------
class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    capital: str
    currency_symbol: str = Field(serialization_alias="currency")
    population: int = Field(ge=0)

    def to_json_dict(self) -> Dict[str, object]:
        """Wire shape: {"name", "capital", "currency", "population"}."""
        return self.model_dump(by_alias=True)

    def __str__(self):
        return (
            f"{self.name} (capital={self.capital}, "
            f"currency={self.currency_symbol}, population={self.population})"
        )


# -----------------------------
# Upstream (REST Countries) payload, only the parts we read.
# Absent or null fields decode to empty values; wrong JSON types
# (e.g. "population": "123") are a decode error.
# -----------------------------
class _UpstreamModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _nulls_are_empty(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class RawName(_UpstreamModel):
    common: StrictStr = ""


class RawCurrency(_UpstreamModel):
    symbol: StrictStr = ""


class RawCountry(_UpstreamModel):
    name: RawName = Field(default_factory=RawName)
    capital: List[StrictStr] = Field(default_factory=list)   # may be empty
    population: StrictInt = 0
    currencies: Dict[str, RawCurrency] = Field(default_factory=dict)  # may be empty
