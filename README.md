# gopatterns

A collection of small, self-contained demonstrations of the classic design
patterns. Each pattern lives in its own module, can be imported and used as an
ordinary library, and has a command that runs a short scenario and prints what
happens along the way. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The patterns

| Pattern                 | Module                        | Command                        |
|-------------------------|-------------------------------|--------------------------------|
| Abstract factory        | `gopatterns.abstract_factory` | `gopatterns-abstract-factory`  |
| Adapter                 | `gopatterns.adapter`          | `gopatterns-adapter`           |
| Bridge                  | `gopatterns.bridge`           | `gopatterns-bridge`            |
| Builder                 | `gopatterns.builder`          | `gopatterns-builder`           |
| Chain of responsibility | `gopatterns.chain`            | `gopatterns-chain`             |
| Command                 | `gopatterns.command`          | `gopatterns-command`           |
| Composite               | `gopatterns.composite`        | `gopatterns-composite`         |
| Decorator               | `gopatterns.decorator`        | `gopatterns-decorator`         |
| Facade                  | `gopatterns.facade`           | `gopatterns-facade`            |
| Factory                 | `gopatterns.factory`          | `gopatterns-factory`           |
| Flyweight               | `gopatterns.flyweight`        | `gopatterns-flyweight`         |
| Iterator                | `gopatterns.iterator`         | `gopatterns-iterator`          |
| Mediator                | `gopatterns.mediator`         | `gopatterns-mediator`          |
| Memento                 | `gopatterns.memento`          | `gopatterns-memento`           |
| Observer                | `gopatterns.observer`         | `gopatterns-observer`          |
| Prototype               | `gopatterns.prototype`        | `gopatterns-prototype`         |
| Proxy                   | `gopatterns.proxy`            | `gopatterns-proxy`             |
| State                   | `gopatterns.state`            | `gopatterns-state`             |
| Strategy                | `gopatterns.strategy`         | `gopatterns-strategy`          |
| Template method         | `gopatterns.template`         | `gopatterns-template`          |
| Visitor                 | `gopatterns.visitor`          | `gopatterns-visitor`           |
| Singleton               | `gopatterns.singleton`        | `gopatterns-singleton`         |

## Running a demonstration

Each command runs its scenario and prints it to standard output:

```
gopatterns-builder
gopatterns-state
gopatterns-proxy
```

All commands take no arguments except `gopatterns-singleton`, which accepts an
optional variant, `default` (the default, double-checked locking) or `once`
(creation done exactly once). It requests the instance from 30 threads:

```
gopatterns-singleton
gopatterns-singleton once
```

The facade and state commands exit with an error message if their scenario
raises `WalletError` or `VendingMachineError`.

## Using the modules

The modules are plain Python and can be used directly.

Abstract factory — pick a brand (`"adidas"` or `"nike"`) and let it make
matching products; an unknown brand raises `ValueError`:

```python
from gopatterns.abstract_factory import get_sports_factory

factory = get_sports_factory("nike")
shoe = factory.make_shoe()     # NikeShoe(logo='nike', size=14)
shirt = factory.make_shirt()
```

Factory — create a gun by name (`"ak47"` or `"musket"`); an unknown name raises
`ValueError`:

```python
from gopatterns.factory import get_gun

gun = get_gun("ak47")          # Ak47(name='AK47 gun', power=4)
```

Builder — a director drives a builder chosen by name (`"normal"` or `"igloo"`):

```python
from gopatterns.builder import Director, get_builder

house = Director(get_builder("igloo")).build_house()
# House(window_type='Snow Window', door_type='Snow Door', floor=1)
```

Decorator — toppings wrap a pizza and add to its price:

```python
from gopatterns.decorator import CheeseTopping, TomatoTopping, VeggieMania

TomatoTopping(CheeseTopping(VeggieMania())).price()   # 32
```

Proxy — `Nginx` is a rate-limiting front for `Application`; each URL is served
at most twice (the limit is `max_allowed_request`), after which it answers
`(403, "Not Allowed")`:

```python
from gopatterns.proxy import Nginx

server = Nginx()
server.handle_request("/app/status", "GET")   # (200, "Ok")
```

Facade — `WalletFacade` checks the account name and security code before
crediting or debiting its wallet, and raises `WalletError` on a wrong account,
a wrong code or an insufficient balance:

```python
from gopatterns.facade import WalletFacade

wallet = WalletFacade("abc", 1234)
wallet.add_money_to_wallet("abc", 1234, 10)
wallet.deduct_money_from_wallet("abc", 1234, 5)
wallet.wallet.balance                          # 5
```

State — `VendingMachine(item_count, item_price)` goes through request, pay and
dispense; an action that is out of order in the current state raises
`VendingMachineError`:

```python
from gopatterns.state import VendingMachine

machine = VendingMachine(1, 10)
machine.request_item()
machine.insert_money(10)
machine.dispense_item()
```

Iterator — `UserCollection` can be looped over directly, or stepped through
with `create_iterator()` and `has_next()`.

Memento — `Caretaker` keeps mementos in order and supports indexing and `len()`.

Visitor — `AreaCalculator` and `MiddleCoordinates` store the area and the middle
point of the last shape that accepted them.

Flyweight — `get_dress_factory()` returns one shared `DressFactory`, which
creates each dress type (`"tDress"`, `"ctDress"`) once and hands out the same
instance afterwards.

## What the package does not do

The strategy module's `Cache` only demonstrates swapping algorithms: when full,
it runs the current `EvictionAlgo` (which records its name in
`cache.evictions`) and frees one slot in its count, but no entry is actually
removed from `storage`. `Cache.get` removes the entry for a key and returns its
value.

The template module's channels always produce the OTP `"1234"` and deliver it
by printing; nothing is sent over any network. Likewise the observer, facade
and adapter scenarios only print what would happen.