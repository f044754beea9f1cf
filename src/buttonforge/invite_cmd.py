"""CLI handler for `buttonforge invite` subcommand."""

import argparse
import json
import sys

import discord

from buttonforge.errors import InvalidArgumentError
from buttonforge.invite import InviteCreate


def run_invite_command(argv: list[str]) -> None:
    parser = argparse.ArgumentParser(prog="buttonforge invite")
    parser.add_argument("channel_id", type=int, help="Channel to invite to")
    parser.add_argument("--voice", action="store_true", help="Channel is a voice channel")
    parser.add_argument("--max-age", type=int, default=None, help="Seconds, 0 = never expires")
    parser.add_argument("--max-uses", type=int, default=None, help="0 = unlimited")
    parser.add_argument("--temporary", action="store_true", help="Grant temporary membership")
    parser.add_argument("--unique", action="store_true", help="Never reuse a similar invite")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--target-user", default=None, help="Stream of this user (voice only)")
    target.add_argument("--target-app", default=None, help="Embedded activity id (voice only)")
    parser.add_argument("--reason", default=None, help="Audit log reason")

    args = parser.parse_args(argv)

    channel_type = discord.ChannelType.voice if args.voice else discord.ChannelType.text
    try:
        invite = (
            InviteCreate(args.channel_id, channel_type)
            .set_max_age(args.max_age)
            .set_max_uses(args.max_uses)
            .set_temporary(args.temporary or None)
            .set_unique(args.unique or None)
            .with_reason(args.reason)
        )
        if args.target_user:
            invite = invite.set_target_user(args.target_user)
        if args.target_app:
            invite = invite.set_target_application(args.target_app)
        request = invite.build_request()
    except InvalidArgumentError as e:
        print(f"error: {e}")
        sys.exit(1)

    out = {"method": request.method, "url": request.url, "json": request.json}
    if request.headers:
        out["headers"] = request.headers
    print(json.dumps(out))
