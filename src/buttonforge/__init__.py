"""Validated Discord button descriptors and REST payload builders."""

from buttonforge.button import (
    Button,
    CustomId,
    Url,
    danger,
    link,
    of,
    primary,
    secondary,
    success,
)
from buttonforge.components import ActionRow
from buttonforge.errors import InvalidArgumentError
from buttonforge.invite import InviteCreate, InviteTargetType
from buttonforge.message_update import MessageUpdate
from buttonforge.styles import ButtonStyle

__all__ = [
    "ActionRow",
    "Button",
    "ButtonStyle",
    "CustomId",
    "InvalidArgumentError",
    "InviteCreate",
    "InviteTargetType",
    "MessageUpdate",
    "Url",
    "danger",
    "link",
    "of",
    "primary",
    "secondary",
    "success",
]
