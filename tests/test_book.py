import io

import pytest

from orderbook.book import OrderBook
from orderbook.orders import OrderType, Side, TradeReporter


class Collect(TradeReporter):
    def __init__(self):
        self.trades = []

    def on_trade(self, trade):
        self.trades.append(trade)


@pytest.fixture
def reporter():
    return Collect()


@pytest.fixture
def book(reporter):
    return OrderBook(reporter)


def total(levels):
    return sum(quantity for _, quantity in levels)


def test_orders_that_do_not_cross_rest(book, reporter):
    book.add_order(Side.BUY, OrderType.GFD, 99, 5, "b1")
    book.add_order(Side.SELL, OrderType.GFD, 100, 10, "s1")
    assert reporter.trades == []
    assert book.sell_levels() == [(100, 10)]
    assert book.buy_levels() == [(99, 5)]


def test_partial_fill_reports_snapshot(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 100, 10, "s1")
    book.add_order(Side.BUY, OrderType.GFD, 101, 4, "b1")
    assert len(reporter.trades) == 1
    trade = reporter.trades[0]
    assert trade.resting.order_id == "s1"
    assert trade.resting.price == 100
    assert trade.resting.quantity == 10
    assert trade.incoming.order_id == "b1"
    assert trade.incoming.price == 101
    assert trade.quantity == 4
    assert total(book.sell_levels()) + trade.quantity == 10
    assert book.buy_levels() == []


def test_time_priority_within_level(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 100, 3, "s1")
    book.add_order(Side.SELL, OrderType.GFD, 100, 7, "s2")
    book.add_order(Side.BUY, OrderType.GFD, 100, 3, "b1")
    assert [t.resting.order_id for t in reporter.trades] == ["s1"]
    assert book.sell_levels() == [(100, 7)]


def test_best_price_matched_first(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 102, 5, "s1")
    book.add_order(Side.SELL, OrderType.GFD, 100, 5, "s2")
    book.add_order(Side.BUY, OrderType.GFD, 105, 10, "b1")
    assert [t.resting.price for t in reporter.trades] == [100, 102]
    assert book.sell_levels() == []
    assert book.buy_levels() == []


def test_sell_matches_highest_bid_first(book, reporter):
    book.add_order(Side.BUY, OrderType.GFD, 98, 5, "b1")
    book.add_order(Side.BUY, OrderType.GFD, 99, 5, "b2")
    book.add_order(Side.SELL, OrderType.GFD, 90, 5, "s1")
    assert [t.resting.order_id for t in reporter.trades] == ["b2"]
    assert book.buy_levels() == [(98, 5)]


def test_unmatched_ioc_does_not_rest(book, reporter):
    book.add_order(Side.BUY, OrderType.IOC, 100, 5, "b1")
    assert book.buy_levels() == []
    assert reporter.trades == []


def test_ioc_remainder_is_discarded(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 100, 2, "s1")
    book.add_order(Side.BUY, OrderType.IOC, 100, 5, "b1")
    assert [t.quantity for t in reporter.trades] == [2]
    assert book.buy_levels() == []
    assert book.sell_levels() == []


def test_cancel_removes_order(book):
    book.add_order(Side.BUY, OrderType.GFD, 99, 5, "b1")
    book.cancel_order("b1")
    assert book.buy_levels() == []


def test_cancel_unknown_is_ignored(book):
    book.add_order(Side.BUY, OrderType.GFD, 99, 5, "b1")
    book.cancel_order("nope")
    assert book.buy_levels() == [(99, 5)]


def test_filled_order_cannot_be_cancelled(book):
    book.add_order(Side.SELL, OrderType.GFD, 100, 5, "s1")
    book.add_order(Side.BUY, OrderType.GFD, 100, 5, "b1")
    book.add_order(Side.SELL, OrderType.GFD, 101, 3, "s2")
    book.cancel_order("s1")
    assert book.sell_levels() == [(101, 3)]


def test_modify_loses_priority(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 100, 3, "s1")
    book.add_order(Side.SELL, OrderType.GFD, 100, 3, "s2")
    book.modify_order("s1", Side.SELL, 100, 3)
    book.add_order(Side.BUY, OrderType.GFD, 100, 3, "b1")
    assert [t.resting.order_id for t in reporter.trades] == ["s2"]
    assert book.sell_levels() == [(100, 3)]
    book.cancel_order("s1")
    assert book.sell_levels() == []


def test_modify_unknown_is_ignored(book):
    book.add_order(Side.SELL, OrderType.GFD, 100, 3, "s1")
    book.modify_order("nope", Side.BUY, 100, 3)
    assert book.sell_levels() == [(100, 3)]
    assert book.buy_levels() == []


def test_modify_can_switch_side_and_cross(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 100, 4, "s1")
    book.add_order(Side.SELL, OrderType.GFD, 105, 4, "s2")
    book.modify_order("s2", Side.BUY, 100, 4)
    assert [(t.resting.order_id, t.incoming.order_id) for t in reporter.trades] == [("s1", "s2")]
    assert book.sell_levels() == []
    assert book.buy_levels() == []


def test_print_book_format(book):
    book.add_order(Side.SELL, OrderType.GFD, 100, 10, "s1")
    book.add_order(Side.SELL, OrderType.GFD, 101, 2, "s2")
    book.add_order(Side.BUY, OrderType.GFD, 98, 5, "b1")
    book.add_order(Side.BUY, OrderType.GFD, 99, 1, "b2")
    out = io.StringIO()
    book.print_book(out)
    assert out.getvalue() == "SELL:\n101 2\n100 10\nBUY:\n99 1\n98 5\n"


def test_quantity_is_conserved(book, reporter):
    book.add_order(Side.SELL, OrderType.GFD, 100, 6, "s1")
    book.add_order(Side.SELL, OrderType.GFD, 101, 6, "s2")
    book.add_order(Side.BUY, OrderType.GFD, 102, 9, "b1")
    traded = sum(t.quantity for t in reporter.trades)
    assert traded + total(book.sell_levels()) == 12
    assert traded + total(book.buy_levels()) == 9