"""A price-time priority limit order book."""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from typing import IO, Deque, Dict, List, Optional, Tuple

from orderbook.orders import Order, OrderType, Side, Trade, TradeReporter

Level = Tuple[int, int]


class OrderBook:
    """Matches incoming orders against resting ones and reports trades."""

    def __init__(self, reporter: TradeReporter) -> None:
        self._reporter = reporter
        self._books: Dict[Side, Dict[int, Deque[Order]]] = {Side.BUY: {}, Side.SELL: {}}
        self._index: Dict[str, Order] = {}

    def _crossing_prices(self, side: Side, price: int) -> List[int]:
        if side is Side.BUY:
            return sorted(p for p in self._books[Side.SELL] if p <= price)
        return sorted((p for p in self._books[Side.BUY] if p >= price), reverse=True)

    def add_order(
        self, side: Side, order_type: OrderType, price: int, quantity: int, order_id: str
    ) -> None:
        """Match a new order; rest any remainder if it is good for day."""
        order = Order(side, order_type, price, quantity, order_id)
        opposite = self._books[Side.SELL if side is Side.BUY else Side.BUY]

        for level_price in self._crossing_prices(side, price):
            if order.quantity <= 0:
                break
            queue = opposite[level_price]
            while queue and order.quantity > 0:
                resting = queue[0]
                traded = min(resting.quantity, order.quantity)
                self._reporter.on_trade(Trade(replace(resting), replace(order), traded))
                order.quantity -= traded
                resting.quantity -= traded
                if resting.quantity == 0:
                    queue.popleft()
                    self._index.pop(resting.order_id, None)
            if queue:
                break
            del opposite[level_price]

        if order.quantity > 0 and order.order_type is OrderType.GFD:
            self._books[side].setdefault(order.price, deque()).append(order)
            self._index[order.order_id] = order

    def cancel_order(self, order_id: str) -> None:
        """Remove a resting order; unknown ids are ignored."""
        order = self._index.pop(order_id, None)
        if order is None:
            return
        levels = self._books[order.side]
        queue = levels[order.price]
        for position, candidate in enumerate(queue):
            if candidate is order:
                del queue[position]
                break
        if not queue:
            del levels[order.price]

    def modify_order(self, order_id: str, side: Side, price: int, quantity: int) -> None:
        """Replace a resting order with a new one; it loses time priority."""
        order = self._index.get(order_id)
        if order is None or order.order_type is OrderType.IOC:
            return
        self.cancel_order(order_id)
        self.add_order(side, OrderType.GFD, price, quantity, order_id)

    @staticmethod
    def _levels(levels: Dict[int, Deque[Order]]) -> List[Level]:
        return [
            (price, sum(order.quantity for order in levels[price]))
            for price in sorted(levels, reverse=True)
        ]

    def sell_levels(self) -> List[Level]:
        """(price, total quantity) of sell levels, highest price first."""
        return self._levels(self._books[Side.SELL])

    def buy_levels(self) -> List[Level]:
        """(price, total quantity) of buy levels, highest price first."""
        return self._levels(self._books[Side.BUY])

    def print_book(self, out: Optional[IO[str]] = None) -> None:
        """Write both sides of the book to ``out`` (standard output by default)."""
        print("SELL:", file=out)
        for price, quantity in self.sell_levels():
            print(f"{price} {quantity}", file=out)
        print("BUY:", file=out)
        for price, quantity in self.buy_levels():
            print(f"{price} {quantity}", file=out)