# core/interval.py
import math


class Interval:
    """
    A closed range [min, max] of ray parameters or color values.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float, maximum: float):
        if minimum > maximum:
            raise ValueError(f"Interval minimum {minimum} exceeds maximum {maximum}")
        self.min = minimum
        self.max = maximum

    @classmethod
    def _unchecked(cls, minimum: float, maximum: float) -> "Interval":
        interval = cls.__new__(cls)
        interval.min = minimum
        interval.max = maximum
        return interval

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """
        Strict containment: the bounds themselves are excluded.
        """
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def with_max(self, maximum: float) -> "Interval":
        """
        Returns an interval sharing this lower bound with a new upper bound.
        """
        return Interval._unchecked(self.min, maximum)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval._unchecked(math.inf, -math.inf)
Interval.UNIVERSE = Interval._unchecked(-math.inf, math.inf)
