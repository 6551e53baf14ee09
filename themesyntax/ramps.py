"""Color ramps built from color stops."""

from __future__ import annotations

from bisect import bisect_right

from textual.color import Color


class LinearColorRamp:
    """Piecewise-linear ramp between color stops.

    Stops are ``(position, color)`` pairs with positions in [0, 1]. Sampling
    outside the stop range returns the nearest end color.
    """

    def __init__(self, stops: list[tuple[float, str]]) -> None:
        if not stops:
            raise ValueError("A color ramp needs at least one stop")
        ordered = sorted(stops, key=lambda stop: stop[0])
        self._positions = [position for position, _ in ordered]
        self._colors = [Color.parse(color) for _, color in ordered]

    @classmethod
    def from_colors(cls, *colors: str) -> LinearColorRamp:
        """Create a ramp with evenly spaced stops.

        Args:
            colors: Colors from position 0 to position 1.

        Returns:
            A new ramp.
        """
        if len(colors) == 1:
            return cls([(0.0, colors[0])])
        step = 1.0 / (len(colors) - 1)
        return cls([(index * step, color) for index, color in enumerate(colors)])

    def __call__(self, position: float) -> str:
        """Sample the ramp.

        Args:
            position: Position in [0, 1]; values outside are clamped.

        Returns:
            Lowercase ``#rrggbb`` hex string.
        """
        position = min(max(position, 0.0), 1.0)
        index = bisect_right(self._positions, position)
        if index == 0:
            return self._hex(self._colors[0])
        if index == len(self._positions):
            return self._hex(self._colors[-1])

        start, end = self._positions[index - 1], self._positions[index]
        factor = (position - start) / (end - start)
        return self._hex(self._colors[index - 1].blend(self._colors[index], factor))

    @staticmethod
    def _hex(color: Color) -> str:
        return color.hex.lower()

    def __repr__(self) -> str:
        stops = ", ".join(
            f"({position}, {self._hex(color)!r})" for position, color in zip(self._positions, self._colors)
        )
        return f"LinearColorRamp([{stops}])"
