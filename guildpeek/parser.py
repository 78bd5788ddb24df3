"""
The MIT License (MIT)

Copyright (c) 2025-present Oignontom8283

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

import typing

from .cdn import Asset
from .enums import ProtocolVersion, ResourceType
from .invite import GuildBadge, Invite, InviteChannel, InviteGuild, Inviter
from .schema import ValidatedInvite
from .utils import parse_dt

if typing.TYPE_CHECKING:
    from . import raw
    from .state import State


class Parser:
    """An factory that produces wrapper objects from validated data.

    Attributes
    ----------
    state: :class:`.State`
        The state the parser is attached to.
    """

    __slots__ = (
        'state',
        '_invite_parsers',
    )

    def __init__(self, *, state: State) -> None:
        self.state: State = state
        self._invite_parsers: dict[ProtocolVersion, typing.Callable[[typing.Any], Invite]] = {
            ProtocolVersion.v9: self.parse_invite_v9,
        }

    def parse_asset(self, category: ResourceType, owner_id: str, hash: str | None, /) -> Asset | None:
        """Creates an asset, if hash is present.

        Parameters
        ----------
        category: :class:`.ResourceType`
            The kind of image.
        owner_id: :class:`str`
            The ID of user or guild owning the image.
        hash: Optional[:class:`str`]
            The image hash.

        Returns
        -------
        Optional[:class:`.Asset`]
            The asset, or ``None`` if there is no hash.
        """
        if hash is None:
            return None
        return Asset(state=self.state, category=category, owner_id=owner_id, hash=hash)

    def parse_invite(self, validated: ValidatedInvite, /) -> Invite:
        """Parses a validated invite object.

        Parameters
        ----------
        validated: :class:`.ValidatedInvite`
            The validated invite payload to parse.

        Returns
        -------
        :class:`.Invite`
            The parsed invite object.
        """
        if not isinstance(validated, ValidatedInvite):
            raise TypeError(f'Expected ValidatedInvite, not {type(validated).__name__}')
        return self._invite_parsers[validated.version](validated.payload)

    # v9 start

    def parse_invite_channel_v9(self, payload: raw.InviteChannel, /) -> InviteChannel:
        return InviteChannel(
            id=payload['id'],
            type=payload['type'],
            name=payload['name'],
        )

    def parse_invite_guild_v9(self, guild: raw.InviteGuild, profile: raw.GuildProfile, /) -> InviteGuild:
        """Parses a invite guild object, merging guild and guild profile payloads.

        Parameters
        ----------
        guild: Dict[:class:`str`, Any]
            The invite guild payload to parse.
        profile: Dict[:class:`str`, Any]
            The guild profile payload to parse.

        Returns
        -------
        :class:`.InviteGuild`
            The parsed invite guild object.
        """
        guild_id = guild['id']

        splash = guild['splash']
        if splash is None:
            banner = self.parse_asset(ResourceType.banners, guild_id, guild['banner'])
        else:
            banner = self.parse_asset(ResourceType.splashes, guild_id, splash)

        return InviteGuild(
            id=guild_id,
            name=guild['name'],
            description=guild['description'],
            members=profile['member_count'],
            onlines=profile['online_count'],
            icon=self.parse_asset(ResourceType.icons, guild_id, guild['icon']),
            banner=banner,
            features=guild['features'],
            verification_level=guild['verification_level'],
            nsfw_level=guild['nsfw_level'],
            nsfw=guild['nsfw'],
            premium_tier=guild['premium_tier'],
            premium_subscription_count=guild['premium_subscription_count'],
            vanity_url=guild['vanity_url_code'],
            tag=profile['tag'],
            badge=GuildBadge(
                count=profile['badge'],
                color_primary=profile['badge_color_primary'],
                color_secondary=profile['badge_color_secondary'],
                hash=profile['badge_hash'],
            ),
            traits=profile['traits'],
            visibility=profile['visibility'],
        )

    def parse_inviter_v9(self, payload: raw.User, /) -> Inviter:
        """Parses a inviter object.

        Parameters
        ----------
        payload: Dict[:class:`str`, Any]
            The user payload to parse.

        Returns
        -------
        :class:`.Inviter`
            The parsed inviter object.
        """
        user_id = payload['id']

        return Inviter(
            id=user_id,
            username=payload['username'],
            global_name=payload.get('global_name') or '',
            discriminator=payload['discriminator'],
            flags=payload['flags'],
            public_flags=payload['public_flags'],
            accent_color=payload['accent_color'],
            banner_color=payload['banner_color'],
            avatar=self.parse_asset(ResourceType.avatars, user_id, payload['avatar']),
            banner=self.parse_asset(ResourceType.banners, user_id, payload['banner']),
        )

    def parse_invite_v9(self, payload: raw.Invite, /) -> Invite:
        """Parses a invite object.

        Parameters
        ----------
        payload: Dict[:class:`str`, Any]
            The invite payload to parse.

        Returns
        -------
        :class:`.Invite`
            The parsed invite object.
        """
        expires_at = payload.get('expires_at')
        inviter = payload.get('inviter')

        return Invite(
            code=payload['code'],
            expires_at=None if expires_at is None else parse_dt(expires_at),
            guild=self.parse_invite_guild_v9(payload['guild'], payload['profile']),
            channel=self.parse_invite_channel_v9(payload['channel']),
            inviter=None if inviter is None else self.parse_inviter_v9(inviter),
        )

    # v9 end


__all__ = ('Parser',)
