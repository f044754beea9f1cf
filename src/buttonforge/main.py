"""Entry point for the buttonforge command line."""

from __future__ import annotations

import logging
import sys

from buttonforge import config

HELP = """\
buttonforge -- build Discord button and invite payloads

commands:
  buttonforge button     Print the JSON for a button
  buttonforge invite     Print the request that creates an invite
  buttonforge help       Show this help message

examples:
  buttonforge button ok --style primary --label "Click Me"
  buttonforge button https://example.com --style link --emoji "🔗"
  buttonforge invite 123456789 --max-age 3600 --max-uses 5
"""


def _dispatch_subcommand(argv: list[str]) -> bool:
    """Route CLI subcommands. Returns True if handled."""
    if not argv:
        return False
    cmd = argv[0]
    rest = argv[1:]
    if cmd in ("help", "--help", "-h"):
        print(HELP)
        return True
    routes: dict[str, tuple[str, str]] = {
        "button": ("buttonforge.button_cmd", "run_button_command"),
        "invite": ("buttonforge.invite_cmd", "run_invite_command"),
    }
    if cmd in routes:
        from importlib import import_module

        mod_path, func_name = routes[cmd]
        getattr(import_module(mod_path), func_name)(rest)
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not _dispatch_subcommand(sys.argv[1:] if argv is None else argv):
        print(HELP)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
