import logging

import numpy as np

from pricing import normal
from pricing.contract import OptionContract, parse_option_type, validate_inputs

logger = logging.getLogger(__name__)


def compute_d1_d2(S: float, K: float, T: float, r: float, sigma: float) -> tuple:
    """
    Helper function to compute d1 and d2 for Black-Scholes formula.

    The Black-Scholes formula requires two intermediate calculations:
    d1 = (ln(S/K) + (r + σ²/2)T) / (σ√T)
    d2 = d1 - σ√T

    Parameters
    ----------
    S : float
        Current stock price (spot price)
    K : float
        Strike price
    T : float
        Time to expiration in years
    r : float
        Risk-free interest rate (annual, continuously compounded)
    sigma : float
        Volatility of the underlying stock (annual standard deviation)

    Returns
    -------
    tuple
        (d1, d2) as calculated from the Black-Scholes formula

    Raises
    ------
    InvalidInputError
        If S, K, T or sigma is zero, negative or not finite (σ√T would be
        undefined), or if r is not finite
    """
    validate_inputs(S, K, T, sigma, r)

    sigma_sqrt_t = sigma * np.sqrt(T)
    d1 = (np.log(S / K) + (r + 0.5 * sigma ** 2) * T) / sigma_sqrt_t
    d2 = d1 - sigma_sqrt_t

    logger.debug("d1=%.10f d2=%.10f (S=%s K=%s T=%s r=%s sigma=%s)", d1, d2, S, K, T, r, sigma)
    return float(d1), float(d2)


def contract_d1_d2(contract: OptionContract) -> tuple:
    """(d1, d2) for an OptionContract."""
    return compute_d1_d2(
        contract.spot, contract.strike, contract.expiry, contract.rate, contract.volatility
    )


def price(contract: OptionContract) -> float:
    """
    Theoretical Black-Scholes value of a European option.

    Call option: C = S·N(d1) - K·e^(-rT)·N(d2)
    Put option:  P = K·e^(-rT)·N(-d2) - S·N(-d1)

    Examples
    --------
    >>> contract = OptionContract(True, spot=100, strike=100, expiry=1, rate=0.05, volatility=0.2)
    >>> print(f"Call price: ${price(contract):.2f}")
    Call price: $10.45
    """
    d1, d2 = contract_d1_d2(contract)
    discounted_strike = contract.strike * np.exp(-contract.rate * contract.expiry)

    if contract.is_call:
        value = contract.spot * normal.cdf(d1) - discounted_strike * normal.cdf(d2)
    else:
        value = discounted_strike * normal.cdf(-d2) - contract.spot * normal.cdf(-d1)

    return float(value)


def black_scholes(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: str = "call"
) -> float:
    """
    Calculate the Black-Scholes price for a European option.

    Scalar-argument front end to :func:`price` for callers that do not
    build an OptionContract themselves.

    Parameters
    ----------
    S : float
        Current stock price (spot price)
    K : float
        Strike price
    T : float
        Time to expiration in years
    r : float
        Risk-free interest rate (annual, continuously compounded)
    sigma : float
        Volatility of the underlying stock (annual standard deviation)
    option_type : str, optional
        Type of option: 'call' (default) or 'put'

    Returns
    -------
    float
        The option price

    Raises
    ------
    InvalidInputError
        If option_type is not 'call' or 'put'
        If any input parameters are invalid

    Examples
    --------
    >>> put_price = black_scholes(S=100, K=100, T=1, r=0.05, sigma=0.2, option_type="put")
    >>> print(f"Put price: ${put_price:.2f}")
    Put price: $5.57
    """
    is_call = parse_option_type(option_type)
    return price(OptionContract(is_call, S, K, T, r, sigma))
