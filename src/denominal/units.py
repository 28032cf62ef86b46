import logging
import math
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Iterable, Union

from denominal.errors import InvalidDenomination, UnknownShortcut

logger = logging.getLogger(__name__)

LIGHT_YEAR_KM = 9_460_730_472.5808


@dataclass(frozen=True)
class UnitSpec:
    singular: str
    plural: str | None = None  # None means the plural is just + 's'

    def __post_init__(self):
        if not isinstance(self.singular, str) or not self.singular:
            raise InvalidDenomination(f"unit name must be a non-empty string, not {self.singular!r}")
        if self.plural is None:
            object.__setattr__(self, "plural", self.singular + "s")
        elif not isinstance(self.plural, str) or not self.plural:
            raise InvalidDenomination(f"plural of {self.singular!r} must be a non-empty string, not {self.plural!r}")

    def name_for(self, magnitude: int) -> str:
        return self.singular if magnitude == 1 else self.plural

    def __str__(self):
        return self.singular


@dataclass(frozen=True)
class DenominationUnit:
    unit: UnitSpec
    divisor: int | float  # how many base units fit in one of this unit

    def __repr__(self):
        return f"DenominationUnit({self.unit.singular!r}, divisor={self.divisor})"


@dataclass(frozen=True)
class Denomination:
    """Canonical denomination, largest divisor first."""
    units: tuple[DenominationUnit, ...]
    list_only: bool = False  # built from bare ratios; names are placeholders

    def __iter__(self):
        return iter(self.units)

    def __len__(self):
        return len(self.units)

    @property
    def names(self) -> list[str]:
        return [u.unit.singular for u in self.units]


# ---- tagged input variants ----

@dataclass(frozen=True)
class Shortcut:
    name: str


@dataclass(frozen=True)
class RatioList:
    ratios: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "ratios", tuple(self.ratios))


@dataclass(frozen=True)
class Explicit:
    items: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


DenominationSpec = Union[Shortcut, RatioList, Explicit]


def _is_number(x) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


def _check_ratio(ratio, position: int):
    if not _is_number(ratio):
        raise InvalidDenomination(f"ratio at position {position} must be a number, not {ratio!r}")
    if not math.isfinite(ratio) or ratio <= 0:
        raise InvalidDenomination(f"ratio at position {position} must be a positive finite number, not {ratio!r}")
    return ratio


def _as_unit(item, position: int) -> UnitSpec:
    if isinstance(item, UnitSpec):
        return item
    if isinstance(item, str):
        return UnitSpec(item)
    if isinstance(item, (list, tuple)) and len(item) == 2 and all(isinstance(x, str) for x in item):
        return UnitSpec(*item)
    raise InvalidDenomination(
        f"unit at position {position} must be a name or a (singular, plural) pair, not {item!r}"
    )


def _with_divisors(chain: list[tuple[UnitSpec, int | float | None]]) -> tuple[DenominationUnit, ...]:
    # chain is base unit first; each entry carries the ratio to the next unit
    units = []
    divisor = 1
    for unit, ratio in chain:
        units.append(DenominationUnit(unit, divisor))
        if ratio is not None:
            divisor *= ratio
    return tuple(reversed(units))


def _from_explicit(items: Iterable) -> Denomination:
    items = list(items)
    if not items:
        raise InvalidDenomination("denomination is empty")
    if len(items) % 2 == 0:
        raise InvalidDenomination(
            f"denomination must alternate unit, ratio, unit and end on a unit; got {len(items)} items"
        )
    chain = []
    for i in range(0, len(items), 2):
        unit = _as_unit(items[i], i)
        ratio = _check_ratio(items[i + 1], i + 1) if i + 1 < len(items) else None
        chain.append((unit, ratio))
    return Denomination(_with_divisors(chain))


def _from_ratios(ratios: Iterable) -> Denomination:
    ratios = [_check_ratio(r, i) for i, r in enumerate(ratios)]
    chain = [(UnitSpec(str(i + 1)), r) for i, r in enumerate(ratios)]
    chain.append((UnitSpec("last"), None))
    return Denomination(_with_divisors(chain), list_only=True)


def _shortcut(*items) -> Denomination:
    return _from_explicit(items)


UNIT_SHORTCUTS: MappingProxyType = MappingProxyType({
    "time": _shortcut("second", 60, "minute", 60, "hour", 24, "day", 7, "week"),
    "weight": _shortcut("gram", 1000, "kilogram", 1000, "tonne"),
    "weight_imperial": _shortcut("ounce", 16, "pound", 14, "stone", 160, "ton"),
    "length": _shortcut("meter", 1000, "kilometer", LIGHT_YEAR_KM, "light year"),
    "length_mm": _shortcut(
        "millimeter", 10, "centimeter", 100, "meter", 1000, "kilometer", LIGHT_YEAR_KM, "light year",
    ),
    "length_imperial": _shortcut(
        ("inch", "inches"), 12, ("foot", "feet"), 3, "yard", 1760, ("mile", "miles"),
    ),
    "volume": _shortcut("milliliter", 1000, "Liter"),
    "volume_imperial": _shortcut("fluid ounce", 20, "pint", 2, "quart", 4, "gallon"),
    "info": _shortcut(
        "bit", 8, "byte", 1000, "kilobyte", 1000, "megabyte", 1000, "gigabyte", 1000,
        "terabyte", 1000, "petabyte", 1000, "exabyte", 1000, "zettabyte", 1000, "yottabyte",
    ),
    "info_1024": _shortcut(
        "bit", 8, "byte", 1024, "kibibyte", 1024, "mebibyte", 1024, "gibibyte", 1024,
        "tebibyte", 1024, "pebibyte", 1024, "exbibyte", 1024, "zebibyte", 1024, "yobibyte",
    ),
})


def coerce(*denomination) -> DenominationSpec:
    """
    Tag a loosely-typed denomination argument list.

      coerce(Shortcut("time"))              -> Shortcut("time")
      coerce([60, 60, 24])                  -> RatioList((60, 60, 24))
      coerce("second", 60, "minute")        -> Explicit(("second", 60, "minute"))
      coerce(["second", 60, "minute"])      -> Explicit(("second", 60, "minute"))
      coerce(("child", "children"))         -> Explicit((("child", "children"),))
    """
    if not denomination:
        raise InvalidDenomination("denomination is empty")
    if len(denomination) == 1:
        only = denomination[0]
        if isinstance(only, (Shortcut, RatioList, Explicit)):
            return only
        if isinstance(only, (list, tuple)):
            if only and all(_is_number(x) for x in only):
                return RatioList(only)
            if len(only) == 2 and all(isinstance(x, str) for x in only):
                return Explicit((only,))  # a lone (singular, plural) unit
            return Explicit(only)
    for d in denomination:
        if isinstance(d, (Shortcut, RatioList, Explicit)):
            raise InvalidDenomination(f"{type(d).__name__} must be passed on its own")
    return Explicit(denomination)


def normalize(*denomination) -> Denomination:
    spec = coerce(*denomination)
    if isinstance(spec, Shortcut):
        try:
            result = UNIT_SHORTCUTS[spec.name]
        except (KeyError, TypeError):
            raise UnknownShortcut(spec.name) from None
        logger.debug("resolved shortcut %r to %s", spec.name, result.names)
        return result
    if isinstance(spec, RatioList):
        result = _from_ratios(spec.ratios)
    else:
        result = _from_explicit(spec.items)
    logger.debug("divisors: %s", [(u.unit.singular, u.divisor) for u in result])
    return result
