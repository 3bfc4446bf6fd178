from .base import Normalizer
from .rules import (
    RuleNormalizer,
    select_candidate,
    first_capital,
    any_currency_symbol,
)

def get_default_normalizer() -> Normalizer:
    """Factory for the normalizer the app uses."""
    return RuleNormalizer()

__all__ = [
    "get_default_normalizer",
    "Normalizer",
    "RuleNormalizer",
    "select_candidate",
    "first_capital",
    "any_currency_symbol",
]
