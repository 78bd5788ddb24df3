from __future__ import annotations

import typing
import typing_extensions


class Clan(typing_extensions.TypedDict):
    identity_guild_id: str | None
    identity_enabled: bool | None
    tag: str | None
    badge: str | None


class AvatarDecorationData(typing_extensions.TypedDict):
    asset: str
    sku_id: str
    expires_at: typing_extensions.NotRequired[int | None]


class User(typing_extensions.TypedDict):
    id: str
    username: str
    avatar: str | None
    discriminator: str
    public_flags: int
    flags: int
    banner: str | None
    accent_color: int | None
    global_name: typing_extensions.NotRequired[str | None]
    avatar_decoration_data: typing_extensions.NotRequired[AvatarDecorationData | None]
    # Shapes below are not documented by Discord
    collectibles: typing_extensions.NotRequired[typing.Any]
    display_name_styles: typing_extensions.NotRequired[typing.Any]
    banner_color: str | None
    clan: typing_extensions.NotRequired[Clan | None]
    primary_guild: typing_extensions.NotRequired[Clan | None]
