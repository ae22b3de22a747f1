"""
Tests for the debit (cedent-side) calculator.
"""

from decimal import Decimal

import pytest

from brokernotes.calc.debit import compute_debit, is_set


def _d(v) -> Decimal:
    return Decimal(str(v))


def _debit(**kw):
    base = dict(
        sum_insured=_d(1_000_000),
        cedent_rate=_d(10),
        reinsurer_rate=None,
        share_pct=_d(50),
        brokerage_pct=_d(10),
        ceding_commission_pct=_d(20),
    )
    base.update(kw)
    return compute_debit(**base)


class TestComputeDebit:
    """Concrete scenario and formula identities."""

    def test_reference_scenario(self):
        a = _debit()
        assert a.gross_premium_cedent == Decimal("100000")
        assert a.share_premium_cedent == Decimal("50000")
        assert a.effective_reinsurer_rate == Decimal("10")
        assert a.gross_premium_reinsurer == Decimal("100000")
        assert a.share_premium_reinsurer == Decimal("50000")
        assert a.ceding_commission_amount == Decimal("10000")
        assert a.gross_brokerage == Decimal("5000")
        assert a.net_brokerage == Decimal("2500")
        assert a.net_premium_from_you == Decimal("40000")
        assert a.net_premium_to_you == Decimal("37500")

    def test_zero_reinsurer_rate_falls_back_to_cedent_rate(self):
        a = _debit(reinsurer_rate=_d(0))
        assert a.effective_reinsurer_rate == _d(10)

    def test_reinsurer_rate_drives_reinsurer_side_only(self):
        a = _debit(reinsurer_rate=_d(8))
        assert a.effective_reinsurer_rate == _d(8)
        assert a.gross_premium_reinsurer == _d(80_000)
        assert a.share_premium_reinsurer == _d(40_000)
        # cedent side untouched
        assert a.share_premium_cedent == _d(50_000)
        assert a.ceding_commission_amount == _d(10_000)
        assert a.gross_brokerage == _d(4_000)
        assert a.net_premium_to_you == _d(40_000) - _d(2_000) - _d(10_000)

    @pytest.mark.parametrize(
        "si,rate,share,brk,ced",
        [
            ("250000", "0.35", "12.5", "7.5", "15"),
            ("1234567.89", "2.75", "33.3333", "12", "27.5"),
            ("10", "100", "100", "0", "0"),
        ],
    )
    def test_identities(self, si, rate, share, brk, ced):
        a = _debit(
            sum_insured=_d(si),
            cedent_rate=_d(rate),
            share_pct=_d(share),
            brokerage_pct=_d(brk),
            ceding_commission_pct=_d(ced),
        )
        expected_share = _d(si) * _d(rate) / 100 * _d(share) / 100
        assert abs(a.share_premium_cedent - expected_share) <= abs(expected_share) * Decimal("1e-9")
        assert a.net_premium_from_you == a.share_premium_cedent - a.ceding_commission_amount
        assert a.net_brokerage == a.gross_brokerage / 2

    def test_negative_inputs_pass_through(self):
        a = _debit(ceding_commission_pct=_d(-5))
        assert a.ceding_commission_amount == _d(-2500)
        assert a.net_premium_from_you == _d(52_500)

    def test_explicit_zero_reinsurer_rate(self):
        a = _debit(reinsurer_rate=_d(0), explicit_zero=True)
        assert a.effective_reinsurer_rate == 0
        assert a.share_premium_reinsurer == 0
        assert a.net_premium_to_you == -a.ceding_commission_amount


class TestIsSet:
    def test_none_is_never_set(self):
        assert not is_set(None)
        assert not is_set(None, explicit_zero=True)

    def test_zero_only_set_when_explicit(self):
        assert not is_set(Decimal("0"))
        assert is_set(Decimal("0"), explicit_zero=True)

    def test_negative_is_not_set_by_default(self):
        # "> 0" rule: a negative override inherits
        assert not is_set(Decimal("-1"))
