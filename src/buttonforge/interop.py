"""Bridges from descriptors to discord.py UI objects for bots that send
messages through discord.py instead of raw REST payloads."""

from collections.abc import Sequence

import discord
from discord.ui import View

from buttonforge import checks
from buttonforge.button import Button
from buttonforge.components import MAX_ROWS, ActionRow
from buttonforge.styles import ButtonStyle

STYLE_MAP: dict[ButtonStyle, discord.ButtonStyle] = {
    ButtonStyle.PRIMARY: discord.ButtonStyle.primary,
    ButtonStyle.SECONDARY: discord.ButtonStyle.secondary,
    ButtonStyle.SUCCESS: discord.ButtonStyle.success,
    ButtonStyle.DANGER: discord.ButtonStyle.danger,
    ButtonStyle.LINK: discord.ButtonStyle.link,
}


def to_discord_style(style: ButtonStyle) -> discord.ButtonStyle:
    checks.check(style in STYLE_MAP, "Style", f"{style.name} has no discord.py equivalent")
    return STYLE_MAP[style]


def to_ui_button(button: Button, row: int | None = None) -> discord.ui.Button:
    return discord.ui.Button(
        style=to_discord_style(button.style),
        label=button.label or None,
        disabled=button.disabled,
        custom_id=button.id,
        url=button.url,
        emoji=button.emoji,
        row=row,
    )


def build_view(rows: Sequence[ActionRow]) -> View | None:
    """Returns None when empty. The view never times out, so buttons with a
    custom id keep working for as long as the bot runs."""
    if not rows:
        return None
    checks.check(
        len(rows) <= MAX_ROWS, "ActionRows", f"Messages hold at most {MAX_ROWS} action rows"
    )
    view = View(timeout=None)
    for index, row in enumerate(rows):
        for button in row:
            view.add_item(to_ui_button(button, row=index))
    return view
