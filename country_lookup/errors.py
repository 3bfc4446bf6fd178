# country_lookup/errors.py

class LookupFailure(Exception):
    """Base class for every terminal failure of a country lookup."""


class InvalidRequest(LookupFailure):
    """The caller sent a query we cannot use (e.g. an empty name)."""


class CountryNotFound(LookupFailure):
    """The query was valid but the directory has no matching country."""

    def __init__(self, message: str = "country not found"):
        super().__init__(message)


class UpstreamUnavailable(LookupFailure):
    """Network error, timeout or a non-success status from the directory."""


class UpstreamInvalidResponse(LookupFailure):
    """The directory answered, but not in the shape we rely on."""


class MissingCapitalError(UpstreamInvalidResponse):
    def __init__(self, country: str):
        super().__init__(f"missing capital data for {country!r}")
        self.country = country
