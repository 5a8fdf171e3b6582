"""Tests for stockmarket.types.OrderType."""

import pytest

from stockmarket.types import OrderType


class TestOrderType:

    def test_opposite(self):
        assert OrderType.BUY.opposite() is OrderType.SELL
        assert OrderType.SELL.opposite() is OrderType.BUY

    @pytest.mark.parametrize("raw", ["buy", "BUY", " Buy "])
    def test_from_str_buy(self, raw):
        assert OrderType.from_str(raw) is OrderType.BUY

    @pytest.mark.parametrize("raw", ["sell", "SELL", "Sell\n"])
    def test_from_str_sell(self, raw):
        assert OrderType.from_str(raw) is OrderType.SELL

    def test_from_str_rejects_unknown_side(self):
        with pytest.raises(ValueError, match="HOLD"):
            OrderType.from_str("HOLD")

    def test_is_str_enum(self):
        assert OrderType.BUY == "buy"
