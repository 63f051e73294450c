from __future__ import annotations

from abc import ABC, abstractmethod
import threading
from typing import Any, Callable, Optional

from .schema import InfoMap, ParamValues


class OutputSlot:
    """
    Thread-safe optional-string cell handed to emit handlers.

    Handlers write into the slot while the dispatcher runs them; the caller
    reads it after ``pass_command`` returns, possibly from another thread.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[str] = None

    def set(self, value: Optional[str]) -> None:
        with self._lock:
            self._value = value

    def get(self) -> Optional[str]:
        with self._lock:
            return self._value

    def take(self) -> Optional[str]:
        """Return the current value and clear the slot."""
        with self._lock:
            value, self._value = self._value, None
            return value

    def clear(self) -> None:
        self.set(None)

    def __repr__(self) -> str:
        return f"OutputSlot({self.get()!r})"


EmitHandler = Callable[[Any, OutputSlot, ParamValues], None]


class Event(ABC):
    """Handler bound to a command name."""

    def __init__(self, handler: Callable[..., None]) -> None:
        self.handler = handler

    @abstractmethod
    def invoke(self, context: Any, values: ParamValues, info: Callable[[], InfoMap]) -> None:
        """Run the handler; ``info`` builds the help map on demand."""

    def __repr__(self) -> str:
        name = getattr(self.handler, "__name__", repr(self.handler))
        return f"{self.__class__.__name__}({name})"


class PlainEvent(Event):
    def invoke(self, context: Any, values: ParamValues, info: Callable[[], InfoMap]) -> None:
        self.handler(context, values)


class InfoEvent(Event):
    """Event that also receives the help lines of every command (help commands)."""

    def invoke(self, context: Any, values: ParamValues, info: Callable[[], InfoMap]) -> None:
        self.handler(context, values, info())


class EmitEvent(Event):
    """Event whose handler may publish a string through its output slot."""

    def __init__(self, handler: EmitHandler, slot: OutputSlot | None = None) -> None:
        super().__init__(handler)
        self.slot = slot if slot is not None else OutputSlot()

    def invoke(self, context: Any, values: ParamValues, info: Callable[[], InfoMap]) -> None:
        self.handler(context, self.slot, values)
