# orderbook

A limit order book with price-time priority matching. It reads a stream of
text commands, matches incoming orders against resting ones, and reports
every trade.

## Installing

    pip install .

## Running

The `orderbook` command reads commands from standard input. It writes trades
and book snapshots to standard output:

    orderbook < orders.txt

It takes no options other than `--help`. If a line holds an unknown command,
side or order type, it prints `orderbook: <message>` to standard error and
exits with status 1; trades and snapshots written before that line stay
written.

## Command format

Each line holds one command, with fields split on whitespace. Leading and
trailing whitespace is ignored, and blank lines and lines starting with `#`
are skipped.

    BUY  <GFD|IOC> <price> <quantity> <order-id>
    SELL <GFD|IOC> <price> <quantity> <order-id>
    CANCEL <order-id>
    MODIFY <order-id> <BUY|SELL> <price> <quantity>
    PRINT

* Orders match against the best opposite price first, and within a price
  level in the order they arrived.
* `GFD` (good for day) orders rest in the book when they are not filled in
  full. `IOC` (immediate or cancel) orders drop whatever is left over.
* A BUY, SELL or MODIFY whose price or quantity is missing, not a whole
  number, or not positive, or that has no order id, is ignored.
* `CANCEL` removes a resting order. Unknown ids are ignored.
* `MODIFY` cancels the resting order and enters it again as a GFD order with
  the new side, price and quantity, so it may trade at once. The order loses
  its time priority. Unknown ids are ignored.
* `PRINT` lists the sell levels from highest to lowest price, then the buy
  levels from highest to lowest price, with the total open quantity at each
  price.
* Any other command stops processing with an error.

Each fill is reported as:

    TRADE <resting-id> <resting-price> <qty> <incoming-id> <incoming-price> <qty>

### Example

    BUY GFD 1000 10 order1
    SELL GFD 900 20 order2
    PRINT

produces

    TRADE order1 1000 10 order2 900 10
    SELL:
    900 10
    BUY:

## Using it as a library

```python
import sys

from orderbook.book import OrderBook
from orderbook.orders import OrderType, Side, TradeReporter


class Collector(TradeReporter):
    def __init__(self):
        self.trades = []

    def on_trade(self, trade):
        self.trades.append(trade)


reporter = Collector()
book = OrderBook(reporter)
book.add_order(Side.BUY, OrderType.GFD, 1000, 10, "order1")
book.add_order(Side.SELL, OrderType.GFD, 900, 20, "order2")
print(reporter.trades[0].quantity)  # 10
print(book.sell_levels())           # [(900, 10)]
book.print_book(sys.stdout)
```

The pieces:

* `orderbook.orders` holds `Side`, `OrderType`, the `Order` and `Trade`
  dataclasses, and the abstract `TradeReporter` whose `on_trade(trade)` is
  called for every fill. A `Trade` carries snapshots of the `resting` and
  `incoming` orders taken just before the fill, and the traded `quantity`.
* `orderbook.book.OrderBook` has `add_order`, `cancel_order`, `modify_order`,
  `sell_levels`, `buy_levels` (lists of `(price, quantity)` pairs, highest
  price first) and `print_book(out)`, which writes to standard output when
  `out` is not given.
* `orderbook.engine.match(lines, reporter, out)` runs a whole command stream
  against a new book; `PRINT` output goes to `out`, or standard output when
  it is not given. `parse_side` and `parse_type` turn text into `Side` and
  `OrderType`. Bad commands, sides or order types raise
  `orderbook.engine.CommandError`, a `ValueError`.
* `orderbook.cli.PrintingReporter(out)` writes trades in the `TRADE` format
  shown above.

## What it does not do

The book lives in memory for one run only: nothing is saved between runs,
and there is no network interface. Commands come from standard input or from
any iterable of lines passed to `match`.

## Tests

    pip install .[test]
    pytest