"""Command-line front end for a handful of helpers.

Run:
  python -m helperkit words 999
  python -m helperkit workdays 2016-08-13 5
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from datetime import date

from rich.console import Console
from rich.text import Text

from .bytes_utils import to_hex_string
from .config import HelperkitConfig, load_config
from .numbers import ordinal, to_words
from .strings import mask, to_seo_url
from .utils.date_utils import add_working_days, to_iso_date

logger = logging.getLogger(__name__)

_WDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_date(value: str) -> date:
    try:
        year_s, month_s, day_s = str(value).strip().split("-")
        return date(int(year_s), int(month_s), int(day_s))
    except ValueError:
        raise ValueError(f"date must be formatted like YYYY-MM-DD, got: {value!r}") from None


def _cmd_words(args: argparse.Namespace, cfg: HelperkitConfig) -> Text:
    return Text(to_words(args.value), style="bold")


def _cmd_ordinal(args: argparse.Namespace, cfg: HelperkitConfig) -> Text:
    return Text(ordinal(args.value), style="bold")


def _cmd_workdays(args: argparse.Namespace, cfg: HelperkitConfig) -> Text:
    origin = parse_date(args.date)
    result = add_working_days(origin, args.days)
    logger.debug("add_working_days origin=%s days=%s result=%s", origin, args.days, result)
    out = Text()
    out.append(to_iso_date(result), style="bold")
    out.append(f" ({_WDAYS[result.weekday()]})", style="dim")
    return out


def _cmd_seo(args: argparse.Namespace, cfg: HelperkitConfig) -> Text:
    return Text(to_seo_url(args.text, strip_dashes=args.strip_dashes))


def _cmd_hex(args: argparse.Namespace, cfg: HelperkitConfig) -> Text:
    return Text(to_hex_string(args.text.encode(cfg.encoding)) or "")


def _cmd_mask(args: argparse.Namespace, cfg: HelperkitConfig) -> Text:
    return Text(mask(args.text, cfg.mask_char, 0, args.visible) or "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="helperkit", description="Formatting and date helpers")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("words", help="Render an integer as English words")
    p.add_argument("value", type=int)
    p.set_defaults(handler=_cmd_words)

    p = sub.add_parser("ordinal", help="Append the ordinal suffix to an integer")
    p.add_argument("value", type=int)
    p.set_defaults(handler=_cmd_ordinal)

    p = sub.add_parser("workdays", help="Move a date by N working days (Mon..Fri)")
    p.add_argument("date", help="Origin date, YYYY-MM-DD")
    p.add_argument("days", type=int)
    p.set_defaults(handler=_cmd_workdays)

    p = sub.add_parser("seo", help="Turn text into a URL slug")
    p.add_argument("text")
    p.add_argument("--strip-dashes", action="store_true")
    p.set_defaults(handler=_cmd_seo)

    p = sub.add_parser("hex", help="Hex-encode text with the configured encoding")
    p.add_argument("text")
    p.set_defaults(handler=_cmd_hex)

    p = sub.add_parser("mask", help="Mask all but the last characters of text")
    p.add_argument("text")
    p.add_argument("--visible", type=int, default=4)
    p.set_defaults(handler=_cmd_mask)
    return parser


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    try:
        cfg = load_config()
    except ValueError as exc:
        (console or Console(highlight=False)).print(Text(str(exc), style="bold red"))
        return 2
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    out = console or Console(no_color=cfg.no_color, highlight=False)
    handler: Callable[[argparse.Namespace, HelperkitConfig], Text] = args.handler
    try:
        text = handler(args, cfg)
    except ValueError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        out.print(Text(str(exc), style="bold red"))
        return 2
    out.print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
