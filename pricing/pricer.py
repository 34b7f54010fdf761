"""
Single entry point combining price and Greeks for one European option.
"""

import logging
from dataclasses import dataclass

from pricing.black_scholes import price
from pricing.contract import OptionContract
from pricing.greeks import Greeks, greeks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingResult:
    price: float
    greeks: Greeks

    def as_dict(self) -> dict:
        return {"price": self.price, "greeks": self.greeks.as_dict()}


def price_contract(contract: OptionContract) -> PricingResult:
    """Price and Greeks of an already-validated contract."""
    result = PricingResult(price=price(contract), greeks=greeks(contract))
    logger.debug("Priced %s %s: %.10f", contract.option_type, contract, result.price)
    return result


def price_option(
    is_call: bool,
    spot: float,
    strike: float,
    expiry: float,
    rate: float,
    volatility: float,
) -> PricingResult:
    """
    Price a European option under Black-Scholes and return its Greeks.

    Parameters
    ----------
    is_call : bool
        True for a call, False for a put
    spot, strike : float
        Underlying and exercise prices (both > 0)
    expiry : float
        Time to expiry in years (> 0)
    rate : float
        Continuously-compounded risk-free rate
    volatility : float
        Annualized volatility (> 0)

    Returns
    -------
    PricingResult
        Theoretical price plus Delta, Gamma, Theta, Vega and Rho

    Raises
    ------
    InvalidInputError
        If spot, strike, expiry or volatility is not strictly positive
    """
    return price_contract(OptionContract(is_call, spot, strike, expiry, rate, volatility))
