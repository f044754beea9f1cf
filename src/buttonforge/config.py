"""User-configurable values loaded from environment variables."""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

API_BASE: str = (os.environ.get("BUTTONFORGE_API_BASE") or "https://discord.com/api").rstrip("/")

_raw_version = os.environ.get("BUTTONFORGE_API_VERSION") or "10"
if not _raw_version.isdigit():
    print(f"BUTTONFORGE_API_VERSION must be an integer, got {_raw_version!r}", file=sys.stderr)
    print("Fix it in .env or your environment.", file=sys.stderr)
    raise SystemExit(1)

API_VERSION: int = int(_raw_version)
LOG_LEVEL: str = (os.environ.get("BUTTONFORGE_LOG_LEVEL") or "WARNING").upper()


def api_url(path: str) -> str:
    """Absolute URL for a compiled route path like ``/channels/1/invites``."""
    return f"{API_BASE}/v{API_VERSION}{path}"
