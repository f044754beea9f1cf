"""Button descriptors: validated factories and copy-on-write derivations.

A ``Button`` either carries a custom id (it sends an interaction back to
the bot) or a url (a LINK button that opens a page). Which one it carries
is tied to its style, and every construction path, including each
``with_*``/``as_*`` derivation, revalidates the whole descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import partial

import discord

from buttonforge import checks
from buttonforge.errors import InvalidArgumentError
from buttonforge.styles import ButtonStyle

ID_MAX_LENGTH = 100
URL_MAX_LENGTH = 512
LABEL_MAX_LENGTH = 80

Emoji = discord.PartialEmoji


@dataclass(frozen=True, slots=True)
class CustomId:
    value: str


@dataclass(frozen=True, slots=True)
class Url:
    value: str


Identity = CustomId | Url


def _identity_field(identity: Identity) -> str:
    return "URL" if isinstance(identity, Url) else "Id"


def _identity_limit(identity: Identity) -> int:
    return URL_MAX_LENGTH if isinstance(identity, Url) else ID_MAX_LENGTH


def coerce_emoji(emoji: Emoji | str | None) -> Emoji | None:
    """Accept ``"👍"`` or ``"<:name:id>"`` wherever a PartialEmoji is expected."""
    if isinstance(emoji, str):
        checks.not_empty(emoji, "Emoji")
        return Emoji.from_str(emoji)
    return emoji


@dataclass(frozen=True, slots=True)
class Button:
    identity: Identity
    label: str
    style: ButtonStyle
    emoji: Emoji | None = None
    disabled: bool = False
    # Only set by _from_wire for style codes this client doesn't know.
    raw_style: int | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        _validate(self)

    @property
    def id(self) -> str | None:
        return self.identity.value if isinstance(self.identity, CustomId) else None

    @property
    def url(self) -> str | None:
        return self.identity.value if isinstance(self.identity, Url) else None

    @property
    def is_link(self) -> bool:
        return self.style is ButtonStyle.LINK

    @classmethod
    def _from_wire(
        cls,
        identity: Identity,
        label: str,
        style: ButtonStyle,
        emoji: Emoji | None,
        disabled: bool,
        raw_style: int | None,
    ) -> Button:
        """Materialise a server-sent button. This is the only way to get one
        with ``ButtonStyle.UNKNOWN``; application code builds through the
        constructor and factories, which reject it."""
        button = object.__new__(cls)
        object.__setattr__(button, "identity", identity)
        object.__setattr__(button, "label", label)
        object.__setattr__(button, "style", style)
        object.__setattr__(button, "emoji", emoji)
        object.__setattr__(button, "disabled", disabled)
        object.__setattr__(button, "raw_style", raw_style)
        _validate(button)
        return button

    def _derive(self, **changes: object) -> Button:
        # replace() goes through __init__, which resets raw_style, so a
        # derived button never keeps the parse-only UNKNOWN escape hatch.
        return replace(self, **changes)  # type: ignore[arg-type]

    def as_disabled(self) -> Button:
        return self._derive(disabled=True)

    def as_enabled(self) -> Button:
        return self._derive(disabled=False)

    def with_disabled(self, disabled: bool) -> Button:
        return self._derive(disabled=disabled)

    def with_emoji(self, emoji: Emoji | str | None) -> Button:
        """``None`` clears the emoji, which requires a non-empty label."""
        emoji = coerce_emoji(emoji)
        checks.check(
            emoji is not None or bool(self.label),
            "Emoji",
            "Cannot remove the emoji of a button without a label",
        )
        return self._derive(emoji=emoji)

    def with_label(self, label: str) -> Button:
        checks.not_empty(label, "Label")
        return self._derive(label=label)

    def with_label_and_emoji(self, label: str, emoji: Emoji | str | None) -> Button:
        """Replace both at once, e.g. to swap a text button for an icon-only one."""
        checks.not_none(label, "Label")
        return self._derive(label=label, emoji=coerce_emoji(emoji))

    def with_id(self, custom_id: str) -> Button:
        """The style is kept, so this raises on a LINK button; build a new
        button with ``of`` to turn a link into an interactive one."""
        return self._derive(identity=CustomId(custom_id))

    def with_url(self, url: str) -> Button:
        """Any button with a url is a LINK button, so the style changes too."""
        return self._derive(identity=Url(url), style=ButtonStyle.LINK)

    def with_style(self, style: ButtonStyle) -> Button:
        checks.not_none(style, "Style")
        checks.check(
            style is not ButtonStyle.UNKNOWN,
            "Style",
            "Cannot make button with unknown style",
        )
        if self.is_link and style is not ButtonStyle.LINK:
            raise InvalidArgumentError("Style", "Cannot change a link button to another style")
        if not self.is_link and style is ButtonStyle.LINK:
            raise InvalidArgumentError("Style", "Cannot change a styled button to a link button")
        return self._derive(style=style)


def _validate(button: Button) -> None:
    """Style, then presence checks, then lengths, then the style/identity pairing.

    The order is fixed so the first violated constraint always decides
    which field the error names.
    """
    checks.not_none(button.style, "Style")
    checks.check(
        isinstance(button.style, ButtonStyle),
        "Style",
        f"Style must be a ButtonStyle, not {type(button.style).__name__}",
    )
    unknown = button.style is ButtonStyle.UNKNOWN
    checks.check(
        not unknown or button.raw_style is not None,
        "Style",
        "Cannot make button with unknown style",
    )

    identity = button.identity
    checks.check(
        isinstance(identity, (CustomId, Url)),
        "Identity",
        f"Identity must be a CustomId or Url, not {type(identity).__name__}",
    )
    id_field = _identity_field(identity)
    checks.not_empty(identity.value, id_field)

    checks.not_none(button.label, "Label")
    checks.check(
        bool(button.label) or button.emoji is not None,
        "Label",
        "Label may not be empty unless the button has an emoji",
    )

    checks.not_longer(identity.value, _identity_limit(identity), id_field)
    checks.not_longer(button.label, LABEL_MAX_LENGTH, "Label")

    if unknown:
        return
    if button.style is ButtonStyle.LINK:
        checks.check(
            isinstance(identity, Url), "Id", "Link buttons must have a url, not a custom id"
        )
    else:
        checks.check(
            isinstance(identity, CustomId),
            "URL",
            f"{button.style.name} buttons must have a custom id, not a url",
        )


def _styled(
    style: ButtonStyle, custom_id: str, label_or_emoji: str | Emoji | None
) -> Button:
    if isinstance(label_or_emoji, str):
        return Button(CustomId(custom_id), label_or_emoji, style)
    checks.not_empty(custom_id, "Id")
    checks.not_none(label_or_emoji, "Emoji")
    return Button(CustomId(custom_id), "", style, emoji=label_or_emoji)


def primary(custom_id: str, label_or_emoji: str | Emoji) -> Button:
    return _styled(ButtonStyle.PRIMARY, custom_id, label_or_emoji)


def secondary(custom_id: str, label_or_emoji: str | Emoji) -> Button:
    return _styled(ButtonStyle.SECONDARY, custom_id, label_or_emoji)


def success(custom_id: str, label_or_emoji: str | Emoji) -> Button:
    return _styled(ButtonStyle.SUCCESS, custom_id, label_or_emoji)


def danger(custom_id: str, label_or_emoji: str | Emoji) -> Button:
    return _styled(ButtonStyle.DANGER, custom_id, label_or_emoji)


def link(url: str, label_or_emoji: str | Emoji) -> Button:
    if isinstance(label_or_emoji, str):
        return Button(Url(url), label_or_emoji, ButtonStyle.LINK)
    checks.not_empty(url, "URL")
    checks.not_none(label_or_emoji, "Emoji")
    return Button(Url(url), "", ButtonStyle.LINK, emoji=label_or_emoji)


def of(
    style: ButtonStyle,
    id_or_url: str,
    label: str | None = None,
    emoji: Emoji | str | None = None,
) -> Button:
    """Build a button whose style is only known at runtime.

    ``id_or_url`` is read as a url for LINK and as a custom id otherwise.
    At least one of ``label`` and ``emoji`` is required.
    """
    checks.not_none(style, "Style")
    checks.check(
        style is not ButtonStyle.UNKNOWN, "Style", "Cannot make button with unknown style"
    )
    emoji = coerce_emoji(emoji)
    factory = link if style is ButtonStyle.LINK else partial(_styled, style)
    if label:
        return factory(id_or_url, label).with_emoji(emoji)
    if emoji is not None:
        return factory(id_or_url, emoji)
    raise InvalidArgumentError(
        "Label/Emoji",
        "Cannot build a button without a label and emoji; provide at least one",
    )
