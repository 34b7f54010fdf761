"""
Contract inputs for European option pricing.
"""

import math
from dataclasses import dataclass

import numpy as np


class InvalidInputError(ValueError):
    """Raised when contract parameters make the Black-Scholes model undefined."""


def validate_inputs(
    spot: float, strike: float, expiry: float, volatility: float, rate: float = 0.0
) -> None:
    """
    Check the parameters that must be strictly positive and finite.

    NaN and infinity are rejected rather than propagated into the price.

    Raises
    ------
    InvalidInputError
        If spot, strike, expiry or volatility is zero, negative, NaN or
        infinite, or if rate is NaN or infinite.
    """
    for name, value in (
        ("spot", spot),
        ("strike", strike),
        ("expiry", expiry),
        ("volatility", volatility),
    ):
        if not (math.isfinite(value) and value > 0):
            raise InvalidInputError(f"{name} must be positive and finite, got {value}")
    if not math.isfinite(rate):
        raise InvalidInputError(f"rate must be finite, got {rate}")


def parse_option_type(option_type: str) -> bool:
    """Map 'call'/'put' (or 'c'/'p') to ``is_call``."""
    kind = str(option_type).strip().lower()
    if kind in ("call", "c"):
        return True
    if kind in ("put", "p"):
        return False
    raise InvalidInputError("option_type must be 'call' or 'put'")


@dataclass(frozen=True)
class OptionContract:
    """
    A European vanilla option together with the market inputs needed to price it.

    Parameters
    ----------
    is_call : bool
        True for a call, False for a put (strings and other truthy values are rejected)
    spot : float
        Current underlying price
    strike : float
        Exercise price
    expiry : float
        Time to expiry in years
    rate : float
        Continuously-compounded risk-free rate (may be zero or negative, must be finite)
    volatility : float
        Annualized volatility of the underlying
    """
    is_call: bool
    spot: float
    strike: float
    expiry: float
    rate: float
    volatility: float

    def __post_init__(self):
        if not isinstance(self.is_call, (bool, np.bool_)):
            raise InvalidInputError(f"is_call must be a bool, got {self.is_call!r}")
        validate_inputs(self.spot, self.strike, self.expiry, self.volatility, self.rate)

    @property
    def option_type(self) -> str:
        return "call" if self.is_call else "put"

    @classmethod
    def from_option_type(
        cls,
        option_type: str,
        spot: float,
        strike: float,
        expiry: float,
        rate: float,
        volatility: float,
    ) -> "OptionContract":
        """Build a contract from a 'call'/'put' string instead of a flag."""
        return cls(parse_option_type(option_type), spot, strike, expiry, rate, volatility)
