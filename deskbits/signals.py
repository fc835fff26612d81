"""A small signal/slot mechanism and the cat-and-mouse demonstration built on it."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, TextIO

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Call ``slot`` every time the signal is emitted."""
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Stop calling ``slot``; raise ValueError if it was never connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError(f"slot {slot!r} is not connected") from None

    def emit(self, *args: Any) -> None:
        """Invoke every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class _Speaker:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _say(self, message: str) -> None:
        out = self._stream if self._stream is not None else sys.stderr
        print(message, file=out)


class Tom(_Speaker):
    """The cat: announces itself and emits ``miao``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(stream)
        self.miao = Signal()

    def miaow(self) -> None:
        self._say("~~Miao~~")
        self.miao.emit()


class Jerry(_Speaker):
    """The mouse: runs away when told to."""

    def run_away(self) -> None:
        self._say("The Cat is coming, run away!!")


def main(argv: list[str] | None = None) -> int:
    """Wire Tom's miao to Jerry's run_away and let Tom miaow once."""
    parser = argparse.ArgumentParser(description="Signal and slot demonstration.")
    parser.parse_args(argv)

    tom = Tom()
    jerry = Jerry()
    tom.miao.connect(jerry.run_away)
    tom.miaow()
    return 0


if __name__ == "__main__":
    sys.exit(main())