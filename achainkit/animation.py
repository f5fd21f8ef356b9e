"""Stepwise movement of a point towards a destination over a fixed number of frames."""

from __future__ import annotations

from collections.abc import Callable, Iterator

Point = tuple[int, int]


class DynamicMove:
    """Moves a point from ``start`` to ``destination`` in ``frames`` equal steps.

    ``interval_ms`` is the delay between frames that a driving timer should use.
    ``on_end`` is called once, on the first step after the last frame.
    """

    def __init__(
        self,
        start: Point,
        destination: Point,
        interval_ms: int,
        frames: int,
        on_end: Callable[[], None] | None = None,
    ) -> None:
        self.start = start
        self.destination = destination
        self.interval_ms = interval_ms
        self.frames = frames
        self.on_end = on_end
        self.position = start
        self.finished = False
        self._count = 1

    def step(self) -> Point | None:
        """Advance one frame and return the new position, or None once done."""
        if self._count > self.frames:
            if not self.finished:
                self.finished = True
                if self.on_end is not None:
                    self.on_end()
            return None
        sx, sy = self.start
        dx, dy = self.destination
        x = int(sx + (dx - sx) * 1.0 * self._count / self.frames)
        y = int(sy + (dy - sy) * 1.0 * self._count / self.frames)
        self.position = (x, y)
        self._count += 1
        return self.position

    def positions(self) -> Iterator[Point]:
        """Yield every remaining position until the move ends."""
        while (point := self.step()) is not None:
            yield point