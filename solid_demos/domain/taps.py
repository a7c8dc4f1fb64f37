"""Single-gesture button capabilities, implemented only where a button needs them"""

from abc import ABC, abstractmethod


class SingleTap(ABC):
    @abstractmethod
    def single_tap(self) -> None:
        ...


class DoubleTap(ABC):
    @abstractmethod
    def double_tap(self) -> None:
        ...


class LongTap(ABC):
    @abstractmethod
    def long_tap(self) -> None:
        ...


class FullButton(SingleTap, DoubleTap, LongTap):
    """Button that supports every gesture"""

    def single_tap(self) -> None:
        print("Single Tap")

    def double_tap(self) -> None:
        print("Double Tap")

    def long_tap(self) -> None:
        print("Long Tap")


class BasicButton(SingleTap):
    """Button that only reacts to a single tap"""

    def single_tap(self) -> None:
        print("Single Tap")
