#!/usr/bin/env python3
import argparse
import json
import logging
import re
import sys

from denominal.engine import decompose
from denominal.errors import DenominalError
from denominal.formatting import render
from denominal.units import UNIT_SHORTCUTS, RatioList, Shortcut, UnitSpec, normalize

logger = logging.getLogger(__name__)

_INT_RX = re.compile(r"[+-]?\d+")
_FLOAT_RX = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def _parse_number(v: str):
    v = v.strip().replace("_", "")
    if _INT_RX.fullmatch(v):
        return int(v)
    if _FLOAT_RX.fullmatch(v):
        return float(v)
    return None


def _quantity(v: str):
    n = _parse_number(v)
    if n is None:
        raise argparse.ArgumentTypeError(f"not a number: {v!r}")
    return n


def _parse_units(tokens: list[str]) -> list:
    """
    Turn CLI tokens into an alternating unit/ratio list:
      second 60 minute 60 hour   -> ["second", 60, "minute", 60, "hour"]
      foot/feet 3 yard           -> [UnitSpec("foot", "feet"), 3, "yard"]
    """
    out = []
    for tok in tokens:
        n = _parse_number(tok)
        if n is not None:
            out.append(n)
        elif "/" in tok:
            singular, plural = tok.split("/", 1)
            out.append(UnitSpec(singular, plural))
        else:
            out.append(tok)
    return out


def _parse_ratios(v: str) -> RatioList:
    ratios = []
    for item in v.split(","):
        n = _parse_number(item)
        if n is None:
            raise argparse.ArgumentTypeError(f"bad ratio {item!r} in {v!r}")
        ratios.append(n)
    return RatioList(ratios)


def _print_result(out) -> None:
    if isinstance(out, dict):
        print(json.dumps(out))
    elif isinstance(out, list):
        print(" ".join(str(x) for x in out))
    else:
        print(out)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    ap = argparse.ArgumentParser(
        prog="denominal",
        description="Break a number up into arbitrary units (e.g. seconds into weeks, days, hours...).",
    )

    ap.add_argument(
        "quantity",
        nargs="?",
        type=_quantity,
        help="The number to break up. Negative numbers are treated as their magnitude.",
    )

    ap.add_argument(
        "units",
        nargs="*",
        help="Alternating unit/ratio list, smallest unit first: second 60 minute 60 hour. "
             "Use singular/plural for irregular plurals: foot/feet.",
    )

    ap.add_argument(
        "-s",
        "--shortcut",
        metavar="NAME",
        help="Use a predefined unit set (see --shortcuts).",
    )

    ap.add_argument(
        "-r",
        "--ratios",
        type=_parse_ratios,
        metavar="R1,R2,...",
        help="Bare ratios, e.g. 60,60,24. Always prints a list.",
    )

    ap.add_argument(
        "-f",
        "--format",
        choices=["string", "list", "dict"],
        default="string",
        help="string: '1 hour and 2 minutes' (default). list: magnitudes. dict: JSON object.",
    )

    ap.add_argument(
        "--explain",
        action="store_true",
        help="Print each unit's division step before the result.",
    )

    ap.add_argument(
        "--shortcuts",
        action="store_true",
        help="List the predefined unit sets and exit.",
    )

    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging.",
    )

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.shortcuts:
        for name, denomination in UNIT_SHORTCUTS.items():
            print(f"{name}: {', '.join(reversed(denomination.names))}")
        return 0

    if args.quantity is None:
        ap.error("quantity is required")

    given = [x for x in (args.shortcut, args.ratios, args.units) if x]
    if len(given) != 1:
        ap.error("give exactly one of --shortcut, --ratios or a unit list")

    if args.shortcut:
        spec = (Shortcut(args.shortcut),)
    elif args.ratios:
        spec = (args.ratios,)
    else:
        spec = tuple(_parse_units(args.units))

    try:
        result = decompose(args.quantity, normalize(*spec))
    except DenominalError as e:
        logger.debug("denomination rejected", exc_info=True)
        print(f"denominal: error: {e}", file=sys.stderr)
        return 2

    if args.explain:
        print(result.explain())
    _print_result(render(result, args.format))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
