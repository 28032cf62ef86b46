from typing import Iterable, Literal

from denominal.engine import DecompositionResult, decompose
from denominal.units import normalize

OutputMode = Literal["string", "list", "dict"]


def to_human_string(items: Iterable[str]) -> str:
    """
      []              -> ""
      ["a"]           -> "a"
      ["a", "b"]      -> "a and b"
      ["a", "b", "c"] -> "a, b, and c"
    """
    items = [str(i) for i in items]
    if len(items) < 2:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"


def render(result: DecompositionResult, mode: OutputMode = "string"):
    if result.denomination.list_only:
        mode = "list"
    if mode == "list":
        return result.magnitudes
    if mode == "dict":
        out = {}
        for unit, magnitude in result:
            out[unit.singular] = magnitude
        return out
    if mode == "string":
        return to_human_string(f"{m} {unit.name_for(m)}" for unit, m in result)
    raise ValueError(f"unknown output mode: {mode!r}")


def denominate(quantity, *denomination, mode: OutputMode = "string"):
    return render(decompose(quantity, normalize(*denomination)), mode)


def format_as_string(quantity, *denomination) -> str:
    """
    Break a number into units and spell it out.

      format_as_string(85703, "second", 60, "minute", 60, "hour", 24, "day", 7, "week")
        -> "23 hours, 48 minutes, and 23 seconds"
      format_as_string(32223, Shortcut("time"))
        -> "8 hours, 57 minutes, and 3 seconds"

    Units that come out as zero are left out, so 0 gives "". A bare
    ``RatioList`` has no unit names and returns the list of magnitudes instead.
    """
    return denominate(quantity, *denomination, mode="string")


def format_as_list(quantity, *denomination) -> list[int]:
    return denominate(quantity, *denomination, mode="list")


def format_as_mapping(quantity, *denomination) -> dict[str, int]:
    return denominate(quantity, *denomination, mode="dict")


denominal = format_as_string
denominal_list = format_as_list
denominal_dict = format_as_mapping
