"""Builder for creating channel invites."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import timedelta
from enum import Enum
from typing import Any

import discord

from buttonforge import checks
from buttonforge.rest import CREATE_INVITE, RestExecutor, RestRequest

log = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 86400  # 24 hours
MAX_AGE_LIMIT = 7 * 24 * 3600
MAX_USES_LIMIT = 100
REASON_MAX_LENGTH = 512

_VOICE_TYPES = frozenset({discord.ChannelType.voice, discord.ChannelType.stage_voice})


class InviteTargetType(Enum):
    UNKNOWN = -1
    NONE = 0
    STREAM = 1
    EMBEDDED_APPLICATION = 2


def _snowflake(value: int | str | Any, field: str) -> int:
    """Accepts an int, a decimal string, or anything with an ``id`` (users, apps)."""
    if isinstance(value, str):
        return checks.parse_snowflake(value, field)
    if not isinstance(value, int):
        value = getattr(value, "id", None)
    checks.not_none(value, field)
    checks.not_negative(value, field)
    return value


@dataclass(frozen=True, slots=True)
class InviteCreate:
    """Unset fields (``None``) are left to Discord's defaults: 24h max age,
    unlimited uses, permanent membership, reuse of a similar invite."""

    channel_id: int
    channel_type: discord.ChannelType = discord.ChannelType.text
    max_age: int | None = None
    max_uses: int | None = None
    temporary: bool | None = None
    unique: bool | None = None
    target_type: InviteTargetType | None = None
    target_application_id: int | None = None
    target_user_id: int | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        checks.not_none(self.channel_id, "Channel ID")

    @property
    def is_voice(self) -> bool:
        return self.channel_type in _VOICE_TYPES

    def set_max_age(self, max_age: int | timedelta | None) -> InviteCreate:
        """``0`` never expires; ``None`` resets to the 24 hour default."""
        if isinstance(max_age, timedelta):
            max_age = int(max_age.total_seconds())
        if max_age is not None:
            checks.not_negative(max_age, "Max age")
            checks.check(
                max_age <= MAX_AGE_LIMIT,
                "Max age",
                f"Max age may not exceed {MAX_AGE_LIMIT} seconds (got {max_age})",
            )
        return replace(self, max_age=max_age)

    def set_max_uses(self, max_uses: int | None) -> InviteCreate:
        """``0`` means unlimited uses."""
        if max_uses is not None:
            checks.not_negative(max_uses, "Max uses")
            checks.check(
                max_uses <= MAX_USES_LIMIT,
                "Max uses",
                f"Max uses may not exceed {MAX_USES_LIMIT} (got {max_uses})",
            )
        return replace(self, max_uses=max_uses)

    def set_temporary(self, temporary: bool | None) -> InviteCreate:
        return replace(self, temporary=temporary)

    def set_unique(self, unique: bool | None) -> InviteCreate:
        return replace(self, unique=unique)

    def set_target_type(self, target_type: InviteTargetType | None) -> InviteCreate:
        if target_type is None or target_type is InviteTargetType.NONE:
            return replace(self, target_type=None)
        checks.check(
            target_type is not InviteTargetType.UNKNOWN,
            "Target type",
            "Cannot set an unknown target type",
        )
        checks.check(
            self.is_voice,
            "Target type",
            f"Cannot set a target type for {self.channel_type.name} channels",
        )
        return replace(self, target_type=target_type)

    def set_target_application(self, application: int | str | Any | None) -> InviteCreate:
        """Targets an embedded activity; ``None`` removes the target."""
        if application is None:
            return replace(self, target_type=None, target_application_id=None)
        app_id = _snowflake(application, "Application ID")
        return replace(
            self.set_target_type(InviteTargetType.EMBEDDED_APPLICATION),
            target_application_id=app_id,
            target_user_id=None,
        )

    def set_target_user(self, user: int | str | Any | None) -> InviteCreate:
        """Targets a user's stream; they must be streaming in this channel."""
        if user is None:
            return replace(self, target_type=None, target_user_id=None)
        user_id = _snowflake(user, "User ID")
        return replace(
            self.set_target_type(InviteTargetType.STREAM),
            target_user_id=user_id,
            target_application_id=None,
        )

    def with_reason(self, reason: str | None) -> InviteCreate:
        """Audit log reason shown to moderators."""
        if reason is not None:
            checks.not_longer(reason, REASON_MAX_LENGTH, "Reason")
        return replace(self, reason=reason)

    def build_request(self) -> RestRequest:
        payload: dict[str, Any] = {}
        if self.max_age is not None:
            payload["max_age"] = self.max_age
        if self.max_uses is not None:
            payload["max_uses"] = self.max_uses
        if self.temporary is not None:
            payload["temporary"] = self.temporary
        if self.unique is not None:
            payload["unique"] = self.unique
        if self.target_type is not None:
            payload["target_type"] = self.target_type.value
        if self.target_type is InviteTargetType.STREAM and self.target_user_id is not None:
            payload["target_user_id"] = str(self.target_user_id)
        if (
            self.target_type is InviteTargetType.EMBEDDED_APPLICATION
            and self.target_application_id is not None
        ):
            payload["target_application_id"] = str(self.target_application_id)
        path = CREATE_INVITE.compile(channel_id=self.channel_id)
        log.debug("invite for channel %s: %s", self.channel_id, payload)
        return RestRequest(CREATE_INVITE.method, path, payload, reason=self.reason)

    def submit(self, executor: RestExecutor) -> Any:
        return executor.submit(self.build_request())
