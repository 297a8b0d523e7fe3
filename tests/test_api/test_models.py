"""
Domain view tests: Market, Order, Position, Balance
"""

from datetime import datetime, timezone

import pytest

from kalshi_sdk.api.models import Balance, Market, Order, Position


class TestMarket:

    def setup_method(self):
        self.payload = {
            "ticker": "KXBTC-24-T1",
            "title": "Bitcoin above 100k",
            "subtitle": "On Dec 31",
            "status": "open",
            "yes_price": 62,
            "no_price": 40,
            "volume": 1500,
            "open_interest": 300,
            "close_time": "2024-12-31T23:59:59Z",
            "category": "Crypto",
            "tags": ["btc"],
            "extra_field": "kept in raw",
        }

    def test_from_api(self):
        # When
        market = Market.from_api(self.payload)

        # Then
        assert market.ticker == "KXBTC-24-T1"
        assert market.is_open
        assert not market.is_settled
        assert market.spread == 22
        assert market.close_time == datetime(2024, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
        assert market.settle_time is None
        assert market.raw["extra_field"] == "kept in raw"

    def test_spread_missing_side(self):
        market = Market.from_api({"ticker": "A", "yes_price": 50})
        assert market.spread is None

    def test_to_dict(self):
        data = Market.from_api(self.payload).to_dict()
        assert data["close_time"] == "2024-12-31T23:59:59+00:00"
        assert data["is_open"] is True
        assert "raw" not in data

    def test_str(self):
        assert str(Market.from_api(self.payload)) == "KXBTC-24-T1: Bitcoin above 100k (Status: open)"

    def test_immutable(self):
        market = Market.from_api(self.payload)
        with pytest.raises(AttributeError):
            market.status = "closed"


class TestOrder:

    def test_partial_fill(self):
        order = Order.from_api({
            "order_id": "o-1", "ticker": "A", "status": "pending",
            "count": 10, "filled_count": 4, "remaining_count": 6, "price": 55,
        })
        assert order.is_pending
        assert order.is_partially_filled
        assert order.fill_percentage == pytest.approx(40.0)

    def test_defaults_for_missing_fields(self):
        order = Order.from_api({"order_id": "o-1"})
        assert order.side == "yes"
        assert order.action == "buy"
        assert order.type == "limit"
        assert order.fill_percentage == 0.0
        assert order.created_time is None

    def test_to_dict_and_str(self):
        order = Order.from_api({
            "order_id": "o-1", "ticker": "A", "action": "sell", "status": "filled",
            "count": 2, "filled_count": 2, "price": 30,
            "created_time": "2024-01-18T12:00:00Z",
        })
        data = order.to_dict()
        assert data["is_filled"] is True
        assert data["created_time"] == "2024-01-18T12:00:00+00:00"
        assert str(order) == "o-1: sell 2 A @ 30¢ (filled)"


class TestPosition:

    def test_long_profitable(self):
        position = Position.from_api({
            "ticker": "A", "position": 10, "total_cost": 500,
            "unrealized_pnl": 50, "realized_pnl": 20,
        })
        assert position.is_long
        assert position.is_profitable
        assert position.average_cost == 50
        assert position.total_pnl == 70
        assert position.return_percentage == pytest.approx(10.0)

    def test_short_average_cost_uses_absolute_count(self):
        position = Position.from_api({"ticker": "A", "position": -4, "total_cost": 200})
        assert position.is_short
        assert position.average_cost == 50

    def test_flat_position(self):
        position = Position.from_api({"ticker": "A"})
        assert position.average_cost == 0.0
        assert position.return_percentage == 0.0

    def test_str_negative_pnl(self):
        position = Position.from_api({"ticker": "A", "side": "no", "position": 3, "unrealized_pnl": -1.5})
        assert str(position) == "A no: 3 contracts, PnL: -$1.50"


class TestBalance:

    def test_dollars(self):
        balance = Balance.from_api({"balance": 12345, "available_balance": 10000, "pending_balance": 2345})
        assert balance.balance_dollars == pytest.approx(123.45)
        assert balance.available_percentage == pytest.approx(10000 / 12345 * 100)
        assert balance.has_sufficient_balance(10000)
        assert not balance.has_sufficient_balance(10001)
        assert str(balance) == "Balance: $123.45 (Available: $100.00)"

    def test_empty_balance(self):
        balance = Balance.from_api({})
        assert balance.balance == 0
        assert balance.available_percentage == 0.0
        assert balance.to_dict()["fees_dollars"] == 0.0
