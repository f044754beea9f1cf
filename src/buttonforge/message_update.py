"""Builder for editing a message sent through an interaction webhook.

Every setter returns a new builder, so a half-configured builder can be
shared and branched without one branch leaking into another. Only fields
that were explicitly set end up in the request body; Discord leaves the
rest of the message untouched.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, BinaryIO, Protocol

import discord

from buttonforge import checks, wire
from buttonforge.button import Button
from buttonforge.components import MAX_ROWS, ActionRow
from buttonforge.errors import InvalidArgumentError
from buttonforge.rest import EDIT_WEBHOOK_MESSAGE, FileUpload, RestExecutor, RestRequest

log = logging.getLogger(__name__)

CONTENT_MAX_LENGTH = 2000
MAX_EMBEDS = 10
EMBED_TOTAL_MAX_LENGTH = 6000
MAX_FILES = 10
SPOILER_PREFIX = "SPOILER_"
ORIGINAL_MESSAGE = "@original"


class MessageLike(Protocol):
    content: str
    embeds: list[discord.Embed]
    components: list[Any]


def _flatten(items: tuple[Any, ...]) -> list[Any]:
    """``f(a, b)`` and ``f([a, b])`` mean the same thing."""
    if len(items) == 1 and isinstance(items[0], (list, tuple)):
        return list(items[0])
    return list(items)


def _as_row(component: Any) -> ActionRow | None:
    if isinstance(component, ActionRow):
        return component
    # discord.py ActionRow components (e.g. from discord.Message.components)
    return wire.parse_row(component.to_dict())


def _read_file(data: bytes | bytearray | BinaryIO | str | os.PathLike[str]) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if hasattr(data, "read"):
        return data.read()
    try:
        return Path(data).read_bytes()
    except FileNotFoundError as e:
        raise InvalidArgumentError("File", f"File not found: {data}") from e


@dataclass(frozen=True, slots=True)
class MessageUpdate:
    application_id: int
    token: str = field(repr=False)
    message_id: int | str = ORIGINAL_MESSAGE
    content: str | None = None
    embeds: tuple[discord.Embed, ...] = ()
    rows: tuple[ActionRow, ...] = ()
    files: tuple[FileUpload, ...] = ()
    updated: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        checks.not_none(self.application_id, "Application ID")
        checks.not_empty(self.token, "Token")
        checks.not_empty(str(self.message_id), "Message ID")

    def _mark(self, name: str, **changes: Any) -> MessageUpdate:
        return replace(self, updated=self.updated | {name}, **changes)

    def set_content(self, content: str | None) -> MessageUpdate:
        """``None`` removes the content from the message."""
        if content is not None:
            checks.not_longer(content, CONTENT_MAX_LENGTH, "Content")
        return self._mark("content", content=content)

    def set_embeds(self, *embeds: discord.Embed | Iterable[discord.Embed]) -> MessageUpdate:
        """Embeds can't be edited on ephemeral messages; Discord ignores them there."""
        items = _flatten(embeds)
        checks.none_none(items, "Embeds")
        checks.check(
            all(isinstance(e, discord.Embed) for e in items),
            "Embeds",
            "Embeds must be discord.Embed instances",
        )
        checks.check(
            len(items) <= MAX_EMBEDS, "Embeds", f"A message holds at most {MAX_EMBEDS} embeds"
        )
        total = sum(len(e) for e in items)
        checks.check(
            total <= EMBED_TOTAL_MAX_LENGTH,
            "Embeds",
            f"Embeds may hold at most {EMBED_TOTAL_MAX_LENGTH} characters in total (got {total})",
        )
        return self._mark("embeds", embeds=tuple(items))

    def add_file(
        self,
        name_or_path: str | os.PathLike[str],
        data: bytes | bytearray | BinaryIO | str | os.PathLike[str] | None = None,
        *,
        spoiler: bool = False,
    ) -> MessageUpdate:
        """``add_file(path)`` uploads under the file's own name;
        ``add_file(name, data)`` takes bytes, a binary stream, or a path.

        ``spoiler=True`` uploads under a ``SPOILER_`` name, which Discord
        renders blurred until clicked.
        """
        checks.not_none(name_or_path, "Name")
        if data is None:
            path = Path(name_or_path)
            name, data = path.name, path
        else:
            name = str(name_or_path)
        checks.not_empty(name, "Name")
        if spoiler and not name.startswith(SPOILER_PREFIX):
            name = SPOILER_PREFIX + name
        checks.check(
            len(self.files) < MAX_FILES, "File", f"A message holds at most {MAX_FILES} files"
        )
        upload = FileUpload(name, _read_file(data))
        return self._mark("files", files=(*self.files, upload))

    def set_action_row(self, *buttons: Button) -> MessageUpdate:
        return self.set_action_rows(ActionRow.of(*buttons))

    def set_action_rows(self, *rows: ActionRow | Iterable[ActionRow]) -> MessageUpdate:
        """An empty call removes all components from the message."""
        items = _flatten(rows)
        checks.none_none(items, "ActionRows")
        checks.check(
            all(isinstance(r, ActionRow) for r in items),
            "ActionRows",
            "ActionRows must be ActionRow instances",
        )
        checks.check(
            len(items) <= MAX_ROWS,
            "ActionRows",
            f"A message holds at most {MAX_ROWS} action rows",
        )
        return self._mark("components", rows=tuple(items))

    def apply_message(self, message: MessageLike) -> MessageUpdate:
        """Copy content, embeds and components of an existing message."""
        checks.not_none(message, "Message")
        rows = []
        for component in message.components:
            row = _as_row(component)
            if row is None:
                log.warning("Dropping action row without buttons from message")
                continue
            rows.append(row)
        return (
            self.set_content(message.content)
            .set_embeds(list(message.embeds))
            .set_action_rows(rows)
        )

    def build_request(self) -> RestRequest:
        payload: dict[str, Any] = {}
        if "content" in self.updated:
            payload["content"] = self.content
        if "embeds" in self.updated:
            payload["embeds"] = [e.to_dict() for e in self.embeds]
        if "components" in self.updated:
            payload["components"] = [wire.row_to_dict(r) for r in self.rows]
        if self.files:
            payload["attachments"] = [
                {"id": index, "filename": f.name} for index, f in enumerate(self.files)
            ]
        path = EDIT_WEBHOOK_MESSAGE.compile(
            application_id=self.application_id,
            token=self.token,
            message_id=self.message_id,
        )
        log.debug(
            "message update for %s: %s, %d file(s)",
            self.message_id,
            sorted(payload),
            len(self.files),
        )
        return RestRequest(EDIT_WEBHOOK_MESSAGE.method, path, payload, self.files)

    def submit(self, executor: RestExecutor) -> Any:
        return executor.submit(self.build_request())
