"""Tests for invite.py — invite creation builder."""

from datetime import timedelta
from types import SimpleNamespace

import discord
import pytest

from buttonforge.errors import InvalidArgumentError
from buttonforge.invite import InviteCreate, InviteTargetType


def _voice():
    return InviteCreate(10, discord.ChannelType.voice)


def test_defaults_send_empty_body():
    request = InviteCreate(10).build_request()

    assert request.method == "POST"
    assert request.path == "/channels/10/invites"
    assert request.json == {}


def test_max_age_seconds_and_timedelta():
    assert InviteCreate(10).set_max_age(3600).max_age == 3600
    assert InviteCreate(10).set_max_age(timedelta(hours=2)).max_age == 7200


def test_max_age_none_resets_to_default():
    invite = InviteCreate(10).set_max_age(60).set_max_age(None)

    assert "max_age" not in invite.build_request().json


def test_max_age_zero_never_expires():
    assert InviteCreate(10).set_max_age(0).build_request().json == {"max_age": 0}


@pytest.mark.parametrize("value", [-1, 7 * 24 * 3600 + 1])
def test_max_age_out_of_range(value):
    with pytest.raises(InvalidArgumentError):
        InviteCreate(10).set_max_age(value)


def test_max_uses_bounds():
    assert InviteCreate(10).set_max_uses(0).max_uses == 0
    with pytest.raises(InvalidArgumentError):
        InviteCreate(10).set_max_uses(-1)
    with pytest.raises(InvalidArgumentError):
        InviteCreate(10).set_max_uses(101)


def test_flags():
    payload = InviteCreate(10).set_temporary(True).set_unique(False).build_request().json

    assert payload == {"temporary": True, "unique": False}


def test_target_type_needs_voice_channel():
    with pytest.raises(InvalidArgumentError, match="text"):
        InviteCreate(10).set_target_type(InviteTargetType.STREAM)


def test_target_type_rejects_unknown():
    with pytest.raises(InvalidArgumentError):
        _voice().set_target_type(InviteTargetType.UNKNOWN)


def test_target_type_none_clears():
    invite = _voice().set_target_type(InviteTargetType.STREAM).set_target_type(None)

    assert invite.target_type is None


def test_target_user_accepts_id_string_and_object():
    by_int = _voice().set_target_user(42)
    by_str = _voice().set_target_user("42")
    by_obj = _voice().set_target_user(SimpleNamespace(id=42))

    assert by_int.target_user_id == by_str.target_user_id == by_obj.target_user_id == 42
    assert by_int.target_type is InviteTargetType.STREAM


def test_target_user_payload():
    payload = _voice().set_target_user(42).build_request().json

    assert payload == {"target_type": 1, "target_user_id": "42"}


def test_target_application_replaces_target_user():
    invite = _voice().set_target_user(42).set_target_application("112233445566778899")

    payload = invite.build_request().json

    assert payload == {"target_type": 2, "target_application_id": "112233445566778899"}


def test_target_application_rejects_bad_snowflake():
    with pytest.raises(InvalidArgumentError):
        _voice().set_target_application("not-a-number")


def test_target_application_none_clears():
    invite = _voice().set_target_application(7).set_target_application(None)

    assert invite.build_request().json == {}


def test_stage_channels_accept_targets():
    invite = InviteCreate(10, discord.ChannelType.stage_voice).set_target_user(1)

    assert invite.target_type is InviteTargetType.STREAM


def test_reason_goes_to_header():
    request = InviteCreate(10).with_reason("raid cleanup").build_request()

    assert request.headers == {"X-Audit-Log-Reason": "raid cleanup"}
    assert request.json == {}


def test_reason_length_limit():
    with pytest.raises(InvalidArgumentError):
        InviteCreate(10).with_reason("r" * 513)


def test_builders_are_independent():
    base = InviteCreate(10).set_max_uses(5)

    a = base.set_max_age(60)
    b = base.set_temporary(True)

    assert a.build_request().json == {"max_uses": 5, "max_age": 60}
    assert b.build_request().json == {"max_uses": 5, "temporary": True}


def test_submit(executor):
    InviteCreate(10).set_max_uses(1).submit(executor)

    assert executor.requests[0].path == "/channels/10/invites"
