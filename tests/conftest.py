# tests/conftest.py
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stockmarket.model import StockOrder, Stockholder, Stocks
from stockmarket.types import OrderType


@pytest.fixture
def alice():
    return Stockholder(id="H1", name="Alice")


@pytest.fixture
def bob():
    return Stockholder(id="H2", name="Bob")


@pytest.fixture
def carol():
    return Stockholder(id="H3", name="Carol")


@pytest.fixture
def make_order():
    """Factory for orders with sensible defaults."""

    def _make(placer=None, enterprise="Acme", order_type=OrderType.BUY, quantity=10, price=25.0, order_id="O1"):
        return StockOrder(
            order_type=order_type,
            order_placer=placer,
            stocks=Stocks(enterprise=enterprise, quantity=quantity, price=price),
            price=price,
            order_id=order_id,
        )

    return _make
