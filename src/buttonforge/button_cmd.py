"""CLI handler for `buttonforge button` subcommand."""

import argparse
import json
import sys

from buttonforge.button import of
from buttonforge.errors import InvalidArgumentError
from buttonforge.styles import ButtonStyle
from buttonforge.wire import button_to_dict

_STYLE_CHOICES = [s.name.lower() for s in ButtonStyle if s is not ButtonStyle.UNKNOWN]


def run_button_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="buttonforge button")
    parser.add_argument("target", help="Custom id, or the url for --style link")
    parser.add_argument("--style", "-s", default="secondary", choices=_STYLE_CHOICES)
    parser.add_argument("--label", "-l", default=None, help="Button text (max 80 chars)")
    parser.add_argument("--emoji", "-e", default=None, help='Unicode or "<:name:id>" emoji')
    parser.add_argument("--disabled", action="store_true", help="Render greyed out")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON")

    args = parser.parse_args(argv)

    try:
        button = of(ButtonStyle[args.style.upper()], args.target, args.label, args.emoji)
    except InvalidArgumentError as e:
        print(f"error: {e}")
        sys.exit(1)
    print(json.dumps(button_to_dict(button.with_disabled(args.disabled)), indent=args.indent))
