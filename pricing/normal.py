"""
Standard normal distribution helpers used by the Black-Scholes formulas.

Thin wrappers around scipy.stats.norm fixed at mean 0 and variance 1.
Infinite and NaN inputs follow IEEE semantics (no validation here).
"""

from scipy.stats import norm


def cdf(x: float) -> float:
    """
    Cumulative distribution function Φ(x) of the standard normal.

    Φ(0) = 0.5 and Φ(-x) = 1 - Φ(x).
    """
    return float(norm.cdf(x))


def pdf(x: float) -> float:
    """
    Probability density function φ(x) = exp(-x²/2) / √(2π).
    """
    return float(norm.pdf(x))
