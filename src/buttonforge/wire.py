"""JSON encoding of buttons and rows, and parsing of server-sent ones."""

from __future__ import annotations

import logging
from typing import Any

import discord
from jsonschema import Draft7Validator

from buttonforge.button import Button, CustomId, Url
from buttonforge.components import ActionRow
from buttonforge.errors import InvalidArgumentError
from buttonforge.styles import ButtonStyle

log = logging.getLogger(__name__)

ACTION_ROW_TYPE = 1
BUTTON_TYPE = 2

BUTTON_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["type", "style"],
    "properties": {
        "type": {"const": BUTTON_TYPE},
        "style": {"type": "integer"},
        "label": {"type": "string"},
        "custom_id": {"type": "string"},
        "url": {"type": "string"},
        "disabled": {"type": "boolean"},
        "emoji": {
            "type": ["object", "null"],
            "properties": {
                "id": {"type": ["string", "integer", "null"]},
                "name": {"type": ["string", "null"]},
                "animated": {"type": "boolean"},
            },
        },
    },
    "oneOf": [{"required": ["custom_id"]}, {"required": ["url"]}],
}

ROW_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["type", "components"],
    "properties": {
        "type": {"const": ACTION_ROW_TYPE},
        "components": {"type": "array", "items": {"type": "object"}},
    },
}

_BUTTON_VALIDATOR = Draft7Validator(BUTTON_SCHEMA)
_ROW_VALIDATOR = Draft7Validator(ROW_SCHEMA)


def _schema_errors(validator: Draft7Validator, data: Any) -> list[str]:
    return [err.message for err in validator.iter_errors(data)]


def button_to_dict(button: Button) -> dict[str, Any]:
    if button.style is ButtonStyle.UNKNOWN:
        raise InvalidArgumentError("Style", "Cannot encode a button with an unknown style")
    payload: dict[str, Any] = {
        "type": BUTTON_TYPE,
        "style": button.style.key,
        "label": button.label,
        "disabled": button.disabled,
    }
    if isinstance(button.identity, Url):
        payload["url"] = button.identity.value
    else:
        payload["custom_id"] = button.identity.value
    if button.emoji is not None:
        payload["emoji"] = button.emoji.to_dict()
    return payload


def row_to_dict(row: ActionRow) -> dict[str, Any]:
    return {
        "type": ACTION_ROW_TYPE,
        "components": [button_to_dict(b) for b in row],
    }


def parse_button(data: dict[str, Any]) -> Button:
    """Unrecognised style codes become ``ButtonStyle.UNKNOWN`` with the code
    kept in ``raw_style``; everything else is validated like a built button."""
    errors = _schema_errors(_BUTTON_VALIDATOR, data)
    if errors:
        raise InvalidArgumentError("Button", f"Invalid button payload: {'; '.join(errors)}")

    style = ButtonStyle.from_key(data["style"])
    raw_style = data["style"] if style is ButtonStyle.UNKNOWN else None
    if raw_style is not None:
        log.debug("Button style %d not recognised, keeping as UNKNOWN", raw_style)

    identity = Url(data["url"]) if "url" in data else CustomId(data["custom_id"])
    emoji_data = data.get("emoji")
    emoji = discord.PartialEmoji.from_dict(emoji_data) if emoji_data else None
    return Button._from_wire(
        identity,
        data.get("label", ""),
        style,
        emoji,
        data.get("disabled", False),
        raw_style,
    )


def parse_row(data: dict[str, Any]) -> ActionRow | None:
    """Components other than buttons are skipped. Returns ``None`` when
    nothing is left, e.g. for a row holding only a select menu."""
    errors = _schema_errors(_ROW_VALIDATOR, data)
    if errors:
        raise InvalidArgumentError("ActionRow", f"Invalid action row payload: {'; '.join(errors)}")
    buttons: list[Button] = []
    for component in data["components"]:
        if component.get("type") != BUTTON_TYPE:
            log.warning("Skipping unsupported component type %s", component.get("type"))
            continue
        buttons.append(parse_button(component))
    if not buttons:
        return None
    return ActionRow(tuple(buttons))
