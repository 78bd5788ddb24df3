from __future__ import annotations

import typing_extensions

from .channels import InviteChannel
from .guilds import GuildProfile, InviteGuild
from .users import User


class Invite(typing_extensions.TypedDict):
    type: int
    code: str
    inviter: typing_extensions.NotRequired[User | None]
    expires_at: typing_extensions.NotRequired[str | None]
    guild: InviteGuild
    guild_id: str
    channel: InviteChannel
    profile: GuildProfile
    approximate_member_count: typing_extensions.NotRequired[int]
    approximate_presence_count: typing_extensions.NotRequired[int]
