"""UI state primitives: an observable single-writer cell and a tagged selection."""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


class CellView(Generic[T]):
    """Read-only handle onto a StateCell. Readers get this, never the cell."""

    def __init__(self, cell: "StateCell[T]") -> None:
        self._cell = cell

    @property
    def value(self) -> T:
        return self._cell.value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        return self._cell.subscribe(callback)


class StateCell(Generic[T]):
    """Observable value with one writer and many readers.

    ``set`` only notifies subscribers when the value actually changes.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Store ``value``. Returns True if it differed from the current one."""
        if value == self._value:
            return False
        self._value = value
        for callback in list(self._subscribers):
            callback(value)
        return True

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register ``callback``; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def view(self) -> CellView[T]:
        return CellView(self)


@dataclass(frozen=True)
class Selection:
    """Tagged optional: either nothing, or exactly one selected key.

    A section holds one Selection, so two items can never be expanded at once.
    """

    key: Hashable | None = None

    @classmethod
    def none(cls) -> "Selection":
        return cls()

    @classmethod
    def of(cls, key: Hashable) -> "Selection":
        if key is None:
            raise ValueError("Selection.of() needs a key; use Selection.none()")
        return cls(key)

    @property
    def is_none(self) -> bool:
        return self.key is None

    def is_selected(self, key: Hashable) -> bool:
        return self.key is not None and self.key == key

    def toggle(self, key: Hashable) -> "Selection":
        """Clicking the selected key clears it; clicking another moves selection there."""
        if self.is_selected(key):
            return Selection.none()
        return Selection.of(key)
