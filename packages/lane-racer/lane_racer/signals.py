"""Deferred game events.

Gameplay code publishes mid-tick; the signal system, last in the tick
order, delivers everything in publish order.  Collaborators such as the
audio sink therefore only ever see a finished tick.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, NamedTuple

Handler = Callable[[str, dict[str, Any]], None]

SOUND = "sound"


class Signal(NamedTuple):
    name: str
    data: dict[str, Any]


class SignalBus:
    """Queue of signals delivered on ``flush``.

    Anything a handler publishes during a flush waits for the next one, so
    one tick's events never cascade within that tick.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)
        self._queue: list[Signal] = []

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers[name].append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> bool:
        handlers = self._handlers.get(name, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, name: str, **data: Any) -> None:
        self._queue.append(Signal(name, data))

    def sound(self, event: str) -> None:
        self.publish(SOUND, event=event)

    def pending(self) -> list[Signal]:
        return list(self._queue)

    def flush(self) -> int:
        """Deliver the queued signals. Returns how many were queued."""
        batch, self._queue = self._queue, []
        for signal in batch:
            for handler in list(self._handlers.get(signal.name, ())):
                handler(signal.name, signal.data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> Callable[[Any, Any], None]:
    def signal_system(state: Any, ctx: Any) -> None:
        bus.flush()

    return signal_system
