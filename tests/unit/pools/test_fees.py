"""Tests for pool fee configuration."""

import pytest

from amm_router.errors import InvalidFeeRate
from amm_router.pools.fees import FeeInToken, NoFee, pool_fee


class TestPoolFee:
    """Tests for NoFee / FeeInToken."""

    def test_no_fee_effective_rate(self):
        assert NoFee().effective_rate() == 1000

    def test_fee_in_token_effective_rate(self):
        """30 thousandths (3%) leaves 970 of every 1000 units."""
        assert FeeInToken(30).effective_rate() == 970

    def test_zero_rate_allowed(self):
        assert FeeInToken(0).effective_rate() == 1000

    def test_highest_rate(self):
        assert FeeInToken(999).effective_rate() == 1

    @pytest.mark.parametrize("rate", [-1, 1000, 1001])
    def test_rate_out_of_range_raises(self, rate):
        with pytest.raises(InvalidFeeRate):
            FeeInToken(rate)

    def test_non_int_rate_raises(self):
        with pytest.raises(InvalidFeeRate):
            FeeInToken(0.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidFeeRate):
            FeeInToken(True)

    def test_equality(self):
        assert FeeInToken(3) == FeeInToken(3)
        assert NoFee() == NoFee()
        assert FeeInToken(0) != NoFee()


class TestPoolFeeFromConfig:
    """Tests for converting raw (flag, rate) reads."""

    def test_flag_set(self):
        assert pool_fee(True, 30) == FeeInToken(30)

    def test_flag_cleared_ignores_rate(self):
        assert pool_fee(False, 30) == NoFee()

    def test_unconfigured_default(self):
        assert pool_fee(False, 0) == NoFee()
