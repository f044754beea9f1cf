"""Routes and the request value handed to whatever actually talks HTTP.

Nothing here performs I/O: builders produce a ``RestRequest`` and callers
pass it to a ``RestExecutor`` of their own (an aiohttp session wrapper,
discord.py's HTTP client, a test double).
"""

from __future__ import annotations

import string
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import quote

from buttonforge import checks, config


@dataclass(frozen=True, slots=True)
class Route:
    method: str
    template: str

    def compile(self, **params: object) -> str:
        """Fill the ``{name}`` placeholders; every placeholder must be given."""
        names = {name for _, name, _, _ in string.Formatter().parse(self.template) if name}
        missing = sorted(names - params.keys())
        checks.check(not missing, "Route", f"Missing route parameters: {', '.join(missing)}")
        for name in names:
            checks.not_empty(str(params[name]), name)
        return self.template.format_map({k: quote(str(v), safe="@") for k, v in params.items()})


EDIT_WEBHOOK_MESSAGE = Route("PATCH", "/webhooks/{application_id}/{token}/messages/{message_id}")
CREATE_INVITE = Route("POST", "/channels/{channel_id}/invites")


@dataclass(frozen=True, slots=True)
class FileUpload:
    name: str
    data: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class RestRequest:
    method: str
    path: str
    json: dict[str, Any]
    files: tuple[FileUpload, ...] = ()
    reason: str | None = None

    @property
    def url(self) -> str:
        return config.api_url(self.path)

    @property
    def headers(self) -> dict[str, str]:
        if not self.reason:
            return {}
        return {"X-Audit-Log-Reason": quote(self.reason, safe="/ ")}


class RestExecutor(Protocol):
    def submit(self, request: RestRequest) -> Awaitable[Any]: ...
