"""
Greeks calculation for Black-Scholes options.

Greeks measure option sensitivity to market parameters:
- Delta: Price sensitivity to spot price changes
- Gamma: Delta sensitivity to spot price changes
- Theta: Price sensitivity to time decay (per year)
- Vega: Price sensitivity to volatility changes (per unit of sigma)
- Rho: Price sensitivity to interest rate changes (per unit of rate)

Rho uses the base term -K·T·e^(-rT) for both option types, scaled by
N(d2) for calls and N(-d2) for puts.
"""

import logging
from dataclasses import asdict, dataclass

import numpy as np

from pricing import normal
from pricing.black_scholes import contract_d1_d2
from pricing.contract import OptionContract

logger = logging.getLogger(__name__)

GREEK_NAMES = ("Delta", "Gamma", "Theta", "Vega", "Rho")


@dataclass(frozen=True)
class Greeks:
    """The five first-order sensitivities of one option."""
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float

    def as_dict(self) -> dict:
        """Name-keyed view, e.g. ``{'Delta': 0.63, 'Gamma': ...}``."""
        return {name.capitalize(): value for name, value in asdict(self).items()}


def greeks(contract: OptionContract) -> Greeks:
    """
    Compute all Greeks for a Black-Scholes option.

    d1, d2 and the discount factor are evaluated once and shared by
    every sensitivity.

    Example
    -------
    >>> contract = OptionContract(True, spot=100, strike=100, expiry=1, rate=0.05, volatility=0.2)
    >>> print(f"Delta: {greeks(contract).delta:.4f}")
    Delta: 0.6368
    """
    S, K, T, r, sigma = (
        contract.spot, contract.strike, contract.expiry, contract.rate, contract.volatility
    )
    d1, d2 = contract_d1_d2(contract)
    sqrt_t = np.sqrt(T)
    discount = np.exp(-r * T)
    pdf_d1 = normal.pdf(d1)

    gamma_value = pdf_d1 / (S * sigma * sqrt_t)
    vega_value = S * sqrt_t * pdf_d1
    rho_base = -K * T * discount
    theta_term1 = (S * sigma * pdf_d1) / (2 * sqrt_t)
    theta_term2 = r * K * discount

    if contract.is_call:
        delta_value = normal.cdf(d1)
        theta_value = -theta_term1 - theta_term2 * normal.cdf(d2)
        rho_value = rho_base * normal.cdf(d2)
    else:
        delta_value = -normal.cdf(-d1)
        theta_value = -theta_term1 + theta_term2 * normal.cdf(-d2)
        rho_value = rho_base * normal.cdf(-d2)

    result = Greeks(
        delta=float(delta_value),
        gamma=float(gamma_value),
        theta=float(theta_value),
        vega=float(vega_value),
        rho=float(rho_value),
    )
    logger.debug("Greeks for %s: %s", contract, result)
    return result


def delta(contract: OptionContract) -> float:
    """
    Sensitivity to spot price changes.

    Call: Δ = N(d1)
    Put: Δ = -N(-d1)
    """
    d1, _ = contract_d1_d2(contract)
    return normal.cdf(d1) if contract.is_call else -normal.cdf(-d1)


def gamma(contract: OptionContract) -> float:
    """
    Sensitivity of delta to spot price changes.

    Γ = n(d1) / (S * σ * √T)
    """
    d1, _ = contract_d1_d2(contract)
    return float(
        normal.pdf(d1) / (contract.spot * contract.volatility * np.sqrt(contract.expiry))
    )


def vega(contract: OptionContract) -> float:
    """
    Sensitivity to volatility changes.

    ν = S * n(d1) * √T
    """
    d1, _ = contract_d1_d2(contract)
    return float(contract.spot * np.sqrt(contract.expiry) * normal.pdf(d1))


def theta(contract: OptionContract) -> float:
    """
    Sensitivity to time decay (per year).

    Call: Θ = -S*n(d1)*σ/(2√T) - r*K*e^(-rT)*N(d2)
    Put: Θ = -S*n(d1)*σ/(2√T) + r*K*e^(-rT)*N(-d2)
    """
    return greeks(contract).theta


def rho(contract: OptionContract) -> float:
    """
    Sensitivity to interest rate changes.

    Call: ρ = -K*T*e^(-rT)*N(d2)
    Put: ρ = -K*T*e^(-rT)*N(-d2)
    """
    return greeks(contract).rho
