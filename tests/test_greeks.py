"""
Tests for analytical Greeks: structure, call/put relationships and
agreement with central finite differences of the price.
"""

import pytest
import numpy as np
from dataclasses import FrozenInstanceError, replace
from pricing.black_scholes import price
from pricing.contract import InvalidInputError, OptionContract
from pricing.greeks import GREEK_NAMES, Greeks, delta, gamma, greeks, rho, theta, vega


@pytest.fixture
def put_contract():
    return OptionContract(False, spot=80, strike=78, expiry=2, rate=0.02, volatility=0.25)


@pytest.fixture
def call_contract(put_contract):
    return replace(put_contract, is_call=True)


class TestGreeksRecord:
    def test_as_dict_has_exactly_five_names(self, put_contract):
        assert set(greeks(put_contract).as_dict()) == set(GREEK_NAMES)

    def test_as_dict_values_match_fields(self, put_contract):
        g = greeks(put_contract)
        d = g.as_dict()
        assert d["Delta"] == g.delta
        assert d["Gamma"] == g.gamma
        assert d["Theta"] == g.theta
        assert d["Vega"] == g.vega
        assert d["Rho"] == g.rho

    def test_record_is_immutable(self, put_contract):
        g = greeks(put_contract)
        with pytest.raises(FrozenInstanceError):
            g.delta = 0.0

    def test_fields_are_floats(self, call_contract):
        g = greeks(call_contract)
        assert all(isinstance(v, float) for v in g.as_dict().values())


class TestCallPutRelationships:
    """Relationships between call and put Greeks for identical parameters."""

    @pytest.mark.parametrize("S,K,T,r,sigma", [
        (80, 78, 2, 0.02, 0.25),
        (80, 80, 1, 0.03, 0.3),
        (100, 130, 0.5, 0.05, 0.15),
    ])
    def test_delta_difference_is_one(self, S, K, T, r, sigma):
        call = greeks(OptionContract(True, S, K, T, r, sigma))
        put = greeks(OptionContract(False, S, K, T, r, sigma))
        assert call.delta - put.delta == pytest.approx(1.0, abs=1e-12)

    def test_gamma_and_vega_identical(self, call_contract, put_contract):
        call = greeks(call_contract)
        put = greeks(put_contract)
        assert call.gamma == put.gamma
        assert call.vega == put.vega

    def test_signs(self, call_contract, put_contract):
        call = greeks(call_contract)
        put = greeks(put_contract)
        assert 0 < call.delta < 1
        assert -1 < put.delta < 0
        assert call.gamma > 0
        assert call.vega > 0
        assert call.theta < 0
        assert call.rho < 0
        assert put.rho < 0

    def test_call_and_put_rho_share_base_term(self, call_contract, put_contract):
        """Rho_call + Rho_put = -K*T*e^(-rT) since N(d2) + N(-d2) = 1."""
        K, T, r = 78, 2, 0.02
        total = greeks(call_contract).rho + greeks(put_contract).rho
        assert total == pytest.approx(-K * T * np.exp(-r * T), rel=1e-12)


class TestFiniteDifferences:
    """Analytical Greeks agree with bumped prices."""

    def _central(self, contract, field, h):
        up = price(replace(contract, **{field: getattr(contract, field) + h}))
        down = price(replace(contract, **{field: getattr(contract, field) - h}))
        return (up - down) / (2 * h)

    @pytest.mark.parametrize("is_call", [True, False])
    def test_delta(self, put_contract, is_call):
        contract = replace(put_contract, is_call=is_call)
        assert greeks(contract).delta == pytest.approx(self._central(contract, "spot", 1e-3), rel=1e-6)

    @pytest.mark.parametrize("is_call", [True, False])
    def test_gamma(self, put_contract, is_call):
        contract = replace(put_contract, is_call=is_call)
        h = 1e-2
        up = price(replace(contract, spot=contract.spot + h))
        mid = price(contract)
        down = price(replace(contract, spot=contract.spot - h))
        assert greeks(contract).gamma == pytest.approx((up - 2 * mid + down) / h ** 2, rel=1e-4)

    @pytest.mark.parametrize("is_call", [True, False])
    def test_vega(self, put_contract, is_call):
        contract = replace(put_contract, is_call=is_call)
        assert greeks(contract).vega == pytest.approx(self._central(contract, "volatility", 1e-5), rel=1e-6)

    @pytest.mark.parametrize("is_call", [True, False])
    def test_theta_is_decay_in_calendar_time(self, put_contract, is_call):
        contract = replace(put_contract, is_call=is_call)
        assert greeks(contract).theta == pytest.approx(-self._central(contract, "expiry", 1e-5), rel=1e-6)

    def test_put_rho(self, put_contract):
        assert greeks(put_contract).rho == pytest.approx(self._central(put_contract, "rate", 1e-6), rel=1e-6)


class TestSingleGreekFunctions:
    """Per-Greek helpers agree with the combined computation."""

    @pytest.mark.parametrize("is_call", [True, False])
    def test_each_matches_combined(self, put_contract, is_call):
        contract = replace(put_contract, is_call=is_call)
        g = greeks(contract)
        assert delta(contract) == pytest.approx(g.delta, rel=1e-14)
        assert gamma(contract) == pytest.approx(g.gamma, rel=1e-14)
        assert vega(contract) == pytest.approx(g.vega, rel=1e-14)
        assert theta(contract) == g.theta
        assert rho(contract) == g.rho


class TestInvalidContracts:
    @pytest.mark.parametrize("field,value", [
        ("spot", -1),
        ("strike", 0),
        ("expiry", 0),
        ("volatility", 0),
    ])
    def test_contract_rejects_non_positive(self, field, value):
        params = dict(is_call=True, spot=80, strike=80, expiry=1, rate=0.03, volatility=0.3)
        params[field] = value
        with pytest.raises(InvalidInputError, match=f"{field} must be positive"):
            OptionContract(**params)

    def test_replace_revalidates(self, call_contract):
        with pytest.raises(InvalidInputError):
            replace(call_contract, volatility=-0.1)

    def test_greeks_is_a_plain_value(self):
        g = Greeks(1.0, 2.0, 3.0, 4.0, 5.0)
        assert g.as_dict() == {"Delta": 1.0, "Gamma": 2.0, "Theta": 3.0, "Vega": 4.0, "Rho": 5.0}
