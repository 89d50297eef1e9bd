"""Core order and trade types shared by the book and the engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Which side of the book an order belongs to."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """How long an order may rest in the book."""

    IOC = "IOC"  # immediate or cancel: never rests
    GFD = "GFD"  # good for day: rests until filled or cancelled


@dataclass
class Order:
    """A limit order; ``quantity`` is what is still open."""

    side: Side
    order_type: OrderType
    price: int
    quantity: int
    order_id: str


@dataclass(frozen=True)
class Trade:
    """A fill between a resting order and an incoming one.

    Both orders are snapshots taken just before the fill was applied.
    """

    resting: Order
    incoming: Order
    quantity: int


class TradeReporter(ABC):
    """Receives every trade the book produces."""

    @abstractmethod
    def on_trade(self, trade: Trade) -> None:
        """Handle one trade."""