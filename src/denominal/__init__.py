"""Break up numbers into arbitrary denominations."""
from denominal.engine import DecompositionResult, Step, decompose
from denominal.errors import DenominalError, InvalidDenomination, UnknownShortcut
from denominal.formatting import (
    denominal,
    denominal_dict,
    denominal_list,
    format_as_list,
    format_as_mapping,
    format_as_string,
    to_human_string,
)
from denominal.units import (
    UNIT_SHORTCUTS,
    Denomination,
    Explicit,
    RatioList,
    Shortcut,
    UnitSpec,
    normalize,
)

__version__ = "0.1.0"

__all__ = [
    "DecompositionResult",
    "Denomination",
    "DenominalError",
    "Explicit",
    "InvalidDenomination",
    "RatioList",
    "Shortcut",
    "Step",
    "UNIT_SHORTCUTS",
    "UnitSpec",
    "UnknownShortcut",
    "decompose",
    "denominal",
    "denominal_dict",
    "denominal_list",
    "format_as_list",
    "format_as_mapping",
    "format_as_string",
    "normalize",
    "to_human_string",
]
