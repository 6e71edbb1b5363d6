"""Small examples of decorator, observer, strategy, state and singleton."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import Any

from drills.sorting import bubble_sort, merge_sort


class Beverage(ABC):
    """A drink with a price and a description."""

    @abstractmethod
    def cost(self) -> float:
        """Price of the drink."""

    @abstractmethod
    def description(self) -> str:
        """Text naming the drink and its additions."""


class Espresso(Beverage):
    """The base drink."""

    def __init__(self, cost: float) -> None:
        self._cost = cost

    def cost(self) -> float:
        return self._cost

    def description(self) -> str:
        return "espresso"


class _Addition(Beverage):
    name = ""

    def __init__(self, beverage: Beverage, cost: float) -> None:
        self._beverage = beverage
        self._cost = cost

    def cost(self) -> float:
        return self._beverage.cost() + self._cost

    def description(self) -> str:
        return self._beverage.description() + f" {self.name} "


class Milk(_Addition):
    """Adds milk to a beverage."""

    name = "milk"

    def __init__(self, beverage: Beverage, cost: float = 1.2) -> None:
        super().__init__(beverage, cost)


class Mocha(_Addition):
    """Adds mocha to a beverage."""

    name = "mocha"

    def __init__(self, beverage: Beverage, cost: float = 1.5) -> None:
        super().__init__(beverage, cost)


class Observer(ABC):
    """Something that wants to hear when a subject changes."""

    @abstractmethod
    def update(self) -> None:
        """React to a notification."""


class Subject:
    """Keeps a set of observers and notifies each of them."""

    def __init__(self) -> None:
        self._observers: dict[Observer, None] = {}

    def add_observer(self, observer: Observer) -> None:
        """Register ``observer``; registering it again has no effect."""
        self._observers.setdefault(observer, None)

    def notify(self) -> None:
        """Call ``update`` on every registered observer."""
        for observer in list(self._observers):
            observer.update()


class SortStrategy(ABC):
    """An interchangeable sorting algorithm."""

    @abstractmethod
    def sort(self, items: Sequence[Any]) -> list[Any]:
        """Return a sorted copy of ``items``."""


class BubbleSortStrategy(SortStrategy):
    def sort(self, items: Sequence[Any]) -> list[Any]:
        return bubble_sort(items)


class MergeSortStrategy(SortStrategy):
    def sort(self, items: Sequence[Any]) -> list[Any]:
        return merge_sort(items)


class Sorter:
    """Sorts with whichever strategy it currently holds."""

    def __init__(self, strategy: SortStrategy) -> None:
        self.strategy = strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        """Replace the strategy used by later calls to ``sort``."""
        self.strategy = strategy

    def sort(self, items: Sequence[Any]) -> list[Any]:
        """Sort ``items`` with the current strategy."""
        return self.strategy.sort(items)


class LightState(Enum):
    """States of a traffic light."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"

    def handle(self) -> str:
        return f"{self.value} state"

    @property
    def following(self) -> LightState:
        return _NEXT_STATE[self]


_NEXT_STATE = {
    LightState.RED: LightState.GREEN,
    LightState.GREEN: LightState.YELLOW,
    LightState.YELLOW: LightState.RED,
}


class TrafficLight:
    """A light that starts red and cycles red, green, yellow."""

    def __init__(self) -> None:
        self.state = LightState.RED

    def handle(self) -> str:
        """Describe the current state."""
        return self.state.handle()

    def advance(self) -> LightState:
        """Move to the next state and return it."""
        self.state = self.state.following
        return self.state


class Singleton:
    """A class with exactly one instance, created lazily and thread-safely."""

    _instance: Singleton | None = None
    _lock = threading.Lock()

    def __new__(cls, *args: Any, **kwargs: Any) -> Singleton:
        raise TypeError("use Singleton.get_instance() instead")

    @staticmethod
    def get_instance() -> Singleton:
        """Return the single instance, creating it on first use."""
        with Singleton._lock:
            if Singleton._instance is None:
                instance = object.__new__(Singleton)
                instance.name = "hello"
                instance.data = 0
                Singleton._instance = instance
            return Singleton._instance

    def __copy__(self) -> Singleton:
        return self

    def __deepcopy__(self, memo: dict) -> Singleton:
        return self