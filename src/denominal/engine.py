import math
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import Iterator

from denominal.units import Denomination, UnitSpec


@dataclass
class Step:
    unit: UnitSpec
    divisor: int | float
    before: int | float
    magnitude: int
    after: int | float
    prev: "Step | None" = None

    def get_explanation(self) -> str:
        prefix = f"{self.unit.singular}(÷{self.divisor}): "
        return f"{prefix}{self.before!r} -> {self.magnitude} (remaining {self.after!r})"

    @property
    def skipped(self) -> bool:
        return self.magnitude == 0

    def precursors(self) -> list["Step"]:
        prevs = []
        step = self.prev
        while step is not None:
            prevs.append(step)
            step = step.prev
        return prevs

    @property
    def history(self) -> list["Step"]:
        return list(reversed(self.precursors())) + [self]

    def __repr__(self):
        return f"Step(unit={self.unit.singular!r}, magnitude={self.magnitude}, ...)"


@dataclass
class DecompositionResult:
    quantity: int | float | Decimal  # as given, sign included
    denomination: Denomination
    last: Step | None = None
    parts: list[tuple[UnitSpec, int]] = field(default_factory=list)

    @property
    def steps(self) -> list[Step]:
        return self.last.history if self.last else []

    @property
    def magnitudes(self) -> list[int]:
        return [m for _, m in self.parts]

    def __iter__(self) -> Iterator[tuple[UnitSpec, int]]:
        return iter(self.parts)

    def __len__(self):
        return len(self.parts)

    def explain(self) -> str:
        return "\n".join(s.get_explanation() for s in self.steps)


def _check_quantity(quantity):
    if not isinstance(quantity, (Real, Decimal)) or isinstance(quantity, bool):
        raise TypeError(f"quantity must be a number, not {type(quantity).__name__}")
    if isinstance(quantity, Decimal):
        finite = quantity.is_finite()
    else:
        # ints and Fractions are always finite and may be too large for a float
        finite = not isinstance(quantity, float) or math.isfinite(quantity)
    if not finite:
        raise ValueError(f"quantity must be finite, not {quantity!r}")


def _take(remaining, divisor):
    if isinstance(remaining, int) and isinstance(divisor, int):
        magnitude = remaining // divisor
        return magnitude, remaining - magnitude * divisor
    try:
        magnitude = int(remaining / divisor)
        return magnitude, remaining - magnitude * divisor
    except OverflowError:
        # too large for a float; finish the division exactly
        remaining, divisor = Fraction(remaining), Fraction(divisor)
        magnitude = int(remaining / divisor)
        return magnitude, remaining - magnitude * divisor


def decompose(quantity, denomination: Denomination) -> DecompositionResult:
    """
    Break ``quantity`` into ``denomination``, largest unit first.

    Each unit takes as many whole divisors as fit in what is left and hands the
    rest down; the base unit truncates any fractional leftover. Units that end
    up with nothing are left out of ``parts`` but stay in the step trail.

    ``Decimal`` quantities are worked as exact ``Fraction``s so they mix with
    float ratios.
    """
    _check_quantity(quantity)
    remaining = abs(quantity)
    if isinstance(remaining, Decimal):
        remaining = Fraction(remaining)
    result = DecompositionResult(quantity=quantity, denomination=denomination)
    for entry in denomination:
        before = remaining
        magnitude, remaining = _take(remaining, entry.divisor)
        result.last = Step(
            unit=entry.unit,
            divisor=entry.divisor,
            before=before,
            magnitude=magnitude,
            after=remaining,
            prev=result.last,
        )
        if magnitude:
            result.parts.append((entry.unit, magnitude))
    return result
