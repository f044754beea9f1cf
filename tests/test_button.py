"""Tests for button.py — factories, derivations, and descriptor invariants."""

import dataclasses

import discord
import pytest

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
from buttonforge.errors import InvalidArgumentError
from buttonforge.styles import ButtonStyle

THUMBS_UP = discord.PartialEmoji(name="👍")


def _field_of(fn, *args):
    with pytest.raises(InvalidArgumentError) as exc:
        fn(*args)
    return exc.value.field


# --- factories ---


def test_primary_with_label():
    button = primary("ok", "Click Me")

    assert button.id == "ok"
    assert button.url is None
    assert button.label == "Click Me"
    assert button.style is ButtonStyle.PRIMARY
    assert button.emoji is None
    assert button.disabled is False


def test_link_with_label():
    button = link("https://a.b", "Go")

    assert button.url == "https://a.b"
    assert button.id is None
    assert button.label == "Go"
    assert button.style is ButtonStyle.LINK
    assert button.disabled is False


@pytest.mark.parametrize(
    ("factory", "style"),
    [
        (primary, ButtonStyle.PRIMARY),
        (secondary, ButtonStyle.SECONDARY),
        (success, ButtonStyle.SUCCESS),
        (danger, ButtonStyle.DANGER),
    ],
)
def test_styled_factories_with_emoji(factory, style):
    button = factory("react", THUMBS_UP)

    assert button.style is style
    assert button.id == "react"
    assert button.label == ""
    assert button.emoji == THUMBS_UP


def test_link_with_emoji():
    button = link("https://a.b", THUMBS_UP)

    assert button.label == ""
    assert button.emoji == THUMBS_UP
    assert button.identity == Url("https://a.b")


def test_factory_checks_identity_before_label():
    assert _field_of(primary, "", "") == "Id"
    assert _field_of(link, "", "") == "URL"


def test_factory_checks_presence_before_length():
    # long id but empty label: the empty label is reported first
    assert _field_of(primary, "x" * 101, "") == "Label"


def test_factory_checks_id_length_before_label_length():
    assert _field_of(primary, "x" * 101, "y" * 81) == "Id"


def test_factory_rejects_missing_emoji():
    assert _field_of(primary, "ok", None) == "Emoji"
    assert _field_of(link, "https://a.b", None) == "Emoji"


def test_factory_rejects_none_id():
    assert _field_of(danger, None, "label") == "Id"


# --- boundaries ---


def test_label_of_80_chars_is_accepted():
    assert len(primary("ok", "a" * 80).label) == 80


def test_label_of_81_chars_is_rejected():
    assert _field_of(primary, "ok", "a" * 81) == "Label"


def test_id_of_100_chars_is_accepted():
    assert primary("i" * 100, "ok").id == "i" * 100


def test_id_of_101_chars_is_rejected():
    assert _field_of(primary, "i" * 101, "ok") == "Id"


def test_url_of_512_chars_is_accepted():
    url = "https://" + "u" * 504

    assert link(url, "Go").url == url


def test_url_of_513_chars_is_rejected():
    assert _field_of(link, "https://" + "u" * 505, "Go") == "URL"


# --- generic factory ---


def test_of_emoji_only_builds_empty_label():
    button = of(ButtonStyle.DANGER, "x", None, THUMBS_UP)

    assert button.id == "x"
    assert button.label == ""
    assert button.style is ButtonStyle.DANGER
    assert button.emoji == THUMBS_UP


def test_of_without_label_or_emoji_fails():
    assert _field_of(of, ButtonStyle.PRIMARY, "x", None, None) == "Label/Emoji"


def test_of_with_label_and_emoji():
    button = of(ButtonStyle.SUCCESS, "yes", "Yes", THUMBS_UP)

    assert button.label == "Yes"
    assert button.emoji == THUMBS_UP


def test_of_link_reads_identity_as_url():
    button = of(ButtonStyle.LINK, "https://a.b", "Go")

    assert button.url == "https://a.b"
    assert button.id is None


def test_of_rejects_unknown_style():
    assert _field_of(of, ButtonStyle.UNKNOWN, "x", "label") == "Style"


def test_of_rejects_none_style():
    assert _field_of(of, None, "x", "label") == "Style"


def test_of_accepts_emoji_string():
    button = of(ButtonStyle.PRIMARY, "x", emoji="<:blob:112233445566778899>")

    assert button.emoji.id == 112233445566778899
    assert button.emoji.name == "blob"


# --- constructor invariants ---


def test_constructor_rejects_link_style_with_custom_id():
    with pytest.raises(InvalidArgumentError) as exc:
        Button(CustomId("ok"), "Go", ButtonStyle.LINK)

    assert exc.value.field == "Id"


def test_constructor_rejects_non_link_style_with_url():
    with pytest.raises(InvalidArgumentError) as exc:
        Button(Url("https://a.b"), "Go", ButtonStyle.PRIMARY)

    assert exc.value.field == "URL"


def test_constructor_rejects_empty_label_without_emoji():
    with pytest.raises(InvalidArgumentError):
        Button(CustomId("ok"), "", ButtonStyle.PRIMARY)


def test_constructor_rejects_unknown_style():
    with pytest.raises(InvalidArgumentError):
        Button(CustomId("ok"), "label", ButtonStyle.UNKNOWN)


def test_constructor_rejects_plain_string_identity():
    with pytest.raises(InvalidArgumentError) as exc:
        Button("ok", "label", ButtonStyle.PRIMARY)

    assert exc.value.field == "Identity"


def test_buttons_are_immutable():
    button = primary("ok", "Click")

    with pytest.raises(dataclasses.FrozenInstanceError):
        button.label = "changed"


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        primary("", "Click")


# --- derivations ---


def test_with_disabled_round_trip():
    original = primary("ok", "Click")

    restored = original.with_disabled(True).with_disabled(False)

    assert restored == original
    assert restored is not original


def test_as_disabled_and_as_enabled():
    button = secondary("ok", "Click")

    assert button.as_disabled().disabled is True
    assert button.as_disabled().as_enabled().disabled is False
    assert button.disabled is False


def test_with_style_between_non_link_styles_preserves_other_fields():
    button = primary("ok", "Click").with_emoji(THUMBS_UP).as_disabled()

    changed = button.with_style(ButtonStyle.DANGER)

    assert changed.style is ButtonStyle.DANGER
    assert changed.id == "ok"
    assert changed.label == "Click"
    assert changed.emoji == THUMBS_UP
    assert changed.disabled is True


def test_with_style_rejects_switch_to_link():
    with pytest.raises(InvalidArgumentError) as exc:
        primary("ok", "Click").with_style(ButtonStyle.LINK)

    assert "link" in str(exc.value)


def test_with_style_rejects_switch_from_link():
    with pytest.raises(InvalidArgumentError):
        link("https://a.b", "Go").with_style(ButtonStyle.PRIMARY)


def test_with_style_rejects_unknown():
    with pytest.raises(InvalidArgumentError):
        primary("ok", "Click").with_style(ButtonStyle.UNKNOWN)


@pytest.mark.parametrize("factory", [primary, secondary, success, danger])
def test_with_url_converts_any_style_to_link(factory):
    button = factory("ok", "Click").with_url("https://x")

    assert button.style is ButtonStyle.LINK
    assert button.url == "https://x"
    assert button.id is None
    assert button.label == "Click"


def test_with_url_validates_length():
    with pytest.raises(InvalidArgumentError):
        primary("ok", "Click").with_url("u" * 513)


def test_with_id_keeps_style():
    button = success("old", "Click").with_id("new")

    assert button.id == "new"
    assert button.style is ButtonStyle.SUCCESS


def test_with_id_on_link_button_fails():
    with pytest.raises(InvalidArgumentError):
        link("https://a.b", "Go").with_id("ok")


def test_with_id_rejects_empty_and_long_ids():
    button = primary("ok", "Click")

    with pytest.raises(InvalidArgumentError):
        button.with_id("")
    with pytest.raises(InvalidArgumentError):
        button.with_id("i" * 101)


def test_with_label_replaces_label_only():
    button = danger("del", "Delete").as_disabled()

    changed = button.with_label("Remove")

    assert changed.label == "Remove"
    assert changed.id == "del"
    assert changed.disabled is True


def test_with_label_rejects_empty_and_long_labels():
    button = primary("ok", "Click")

    with pytest.raises(InvalidArgumentError):
        button.with_label("")
    with pytest.raises(InvalidArgumentError):
        button.with_label("a" * 81)


def test_with_emoji_none_clears_emoji_when_label_present():
    button = primary("ok", "Click").with_emoji(THUMBS_UP)

    assert button.with_emoji(None).emoji is None


def test_with_emoji_none_fails_without_label():
    button = primary("ok", THUMBS_UP)

    with pytest.raises(InvalidArgumentError) as exc:
        button.with_emoji(None)

    assert exc.value.field == "Emoji"


def test_with_label_and_emoji_swaps_to_icon_only():
    button = primary("ok", "Click")

    changed = button.with_label_and_emoji("", THUMBS_UP)

    assert changed.label == ""
    assert changed.emoji == THUMBS_UP


def test_with_label_and_emoji_rejects_empty_pair():
    with pytest.raises(InvalidArgumentError):
        primary("ok", "Click").with_label_and_emoji("", None)


def test_derivation_leaves_receiver_untouched():
    button = primary("ok", "Click")

    button.with_label("Other").with_url("https://x").as_disabled()

    assert button == primary("ok", "Click")


def test_constructor_does_not_accept_raw_style():
    with pytest.raises(TypeError):
        Button(CustomId("x"), "label", ButtonStyle.UNKNOWN, raw_style=99)


def test_built_buttons_have_no_raw_style():
    assert primary("ok", "Click").raw_style is None
