from __future__ import annotations

import typing
import typing_extensions


class InviteGuild(typing_extensions.TypedDict):
    id: str
    name: str
    splash: str | None
    banner: str | None
    description: str | None
    icon: str | None
    features: list[str]
    verification_level: int
    vanity_url_code: str | None
    nsfw_level: int
    nsfw: bool
    premium_subscription_count: int
    premium_tier: int


class GuildProfile(typing_extensions.TypedDict):
    id: str
    name: str
    icon_hash: str | None
    member_count: int
    online_count: int
    description: str | None
    banner_hash: str | None
    game_application_ids: list[str]
    game_activity: typing_extensions.NotRequired[typing.Any]
    tag: str | None
    badge: int
    badge_color_primary: str
    badge_color_secondary: str
    badge_hash: str | None
    traits: list[typing.Any]
    features: list[str]
    visibility: int
    custom_banner_hash: str | None
    premium_subscription_count: int
    premium_tier: int
