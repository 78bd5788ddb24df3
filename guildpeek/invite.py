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

from datetime import datetime
import typing

from attrs import define, field

from .enums import ChannelType, NSFWLevel, PremiumTier, VerificationLevel

if typing.TYPE_CHECKING:
    from .cdn import Asset


INVITE_URL_BASE: str = 'https://discord.gg'
DEFAULT_AVATAR_URL_BASE: str = 'https://cdn.discordapp.com/embed/avatars'


@define(slots=True, frozen=True)
class InviteChannel:
    """Represents the channel an invite points to."""

    id: str = field(repr=True, kw_only=True)
    """:class:`str`: The channel's ID."""

    type: int = field(repr=True, kw_only=True)
    """:class:`int`: The channel's raw type."""

    name: str = field(repr=True, kw_only=True)
    """:class:`str`: The channel's name."""

    @property
    def kind(self) -> ChannelType | int:
        """Union[:class:`.ChannelType`, :class:`int`]: The channel's type. If unknown, the raw value is returned."""
        return ChannelType.try_value(self.type)


@define(slots=True, frozen=True)
class GuildBadge:
    """Represents the guild tag badge."""

    count: int = field(repr=True, kw_only=True)
    """:class:`int`: The badge."""

    color_primary: str = field(repr=True, kw_only=True)
    """:class:`str`: The primary badge color, in ``#RRGGBB`` format."""

    color_secondary: str = field(repr=True, kw_only=True)
    """:class:`str`: The secondary badge color, in ``#RRGGBB`` format."""

    hash: str | None = field(repr=True, kw_only=True)
    """Optional[:class:`str`]: The badge image hash."""


@define(slots=True, frozen=True)
class InviteGuild:
    """Represents a snapshot of guild at the time invite was fetched."""

    id: str = field(repr=True, kw_only=True)
    """:class:`str`: The guild's ID."""

    name: str = field(repr=True, kw_only=True)
    """:class:`str`: The guild's name."""

    description: str | None = field(repr=True, kw_only=True)
    """Optional[:class:`str`]: The guild's description."""

    members: int = field(repr=True, kw_only=True)
    """:class:`int`: The approximate count of members."""

    onlines: int = field(repr=True, kw_only=True)
    """:class:`int`: The approximate count of online members."""

    icon: Asset | None = field(repr=True, kw_only=True)
    """Optional[:class:`.Asset`]: The guild's icon."""

    banner: Asset | None = field(repr=True, kw_only=True)
    """Optional[:class:`.Asset`]: The guild's banner. This is invite splash if guild has one, otherwise guild banner."""

    features: list[str] = field(repr=True, kw_only=True)
    """List[:class:`str`]: The guild's features."""

    verification_level: int = field(repr=True, kw_only=True)
    """:class:`int`: The guild's raw verification level."""

    nsfw_level: int = field(repr=True, kw_only=True)
    """:class:`int`: The guild's raw NSFW level."""

    nsfw: bool = field(repr=True, kw_only=True)
    """:class:`bool`: Whether the guild is marked as NSFW."""

    premium_tier: int = field(repr=True, kw_only=True)
    """:class:`int`: The guild's raw boost level."""

    premium_subscription_count: int = field(repr=True, kw_only=True)
    """:class:`int`: The count of boosts the guild has."""

    vanity_url: str | None = field(repr=True, kw_only=True)
    """Optional[:class:`str`]: The guild's vanity invite code."""

    tag: str | None = field(repr=True, kw_only=True)
    """Optional[:class:`str`]: The guild tag."""

    badge: GuildBadge = field(repr=True, kw_only=True)
    """:class:`.GuildBadge`: The guild tag badge."""

    traits: list[typing.Any] = field(repr=False, kw_only=True)
    """List[Any]: The guild traits, as sent by Discord."""

    visibility: int = field(repr=True, kw_only=True)
    """:class:`int`: The guild's profile visibility, as sent by Discord."""

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object, /) -> bool:
        return self is other or isinstance(other, InviteGuild) and self.id == other.id

    def has_feature(self, feature: str, /) -> bool:
        """:class:`bool`: Whether the guild has the given feature, for example ``'COMMUNITY'``."""
        return feature in self.features

    @property
    def verification(self) -> VerificationLevel | int:
        """Union[:class:`.VerificationLevel`, :class:`int`]: The guild's verification level."""
        return VerificationLevel.try_value(self.verification_level)

    @property
    def content_filter(self) -> NSFWLevel | int:
        """Union[:class:`.NSFWLevel`, :class:`int`]: The guild's NSFW level."""
        return NSFWLevel.try_value(self.nsfw_level)

    @property
    def boost_tier(self) -> PremiumTier | int:
        """Union[:class:`.PremiumTier`, :class:`int`]: The guild's boost level."""
        return PremiumTier.try_value(self.premium_tier)


@define(slots=True, frozen=True)
class Inviter:
    """Represents the user who created an invite."""

    id: str = field(repr=True, kw_only=True)
    """:class:`str`: The user's ID."""

    username: str = field(repr=True, kw_only=True)
    """:class:`str`: The user's username."""

    global_name: str = field(repr=True, kw_only=True)
    """:class:`str`: The user's global name. Empty string if user has none."""

    discriminator: str = field(repr=True, kw_only=True)
    """:class:`str`: The user's discriminator. ``'0'`` for users that migrated to unique usernames."""

    flags: int = field(repr=True, kw_only=True)
    """:class:`int`: The user's raw flags."""

    public_flags: int = field(repr=True, kw_only=True)
    """:class:`int`: The user's raw public flags."""

    accent_color: int | None = field(repr=True, kw_only=True)
    """Optional[:class:`int`]: The user's banner color as integer."""

    banner_color: str | None = field(repr=True, kw_only=True)
    """Optional[:class:`str`]: The user's banner color in ``#RRGGBB`` format."""

    avatar: Asset | None = field(repr=True, kw_only=True)
    """Optional[:class:`.Asset`]: The user's avatar. ``None`` if user uses default avatar, see :attr:`.default_avatar_url`."""

    banner: Asset | None = field(repr=True, kw_only=True)
    """Optional[:class:`.Asset`]: The user's banner."""

    @property
    def display_name(self) -> str:
        """:class:`str`: The user's global name, falling back to username."""
        return self.global_name or self.username

    @property
    def default_avatar_url(self) -> str:
        """:class:`str`: The URL to default avatar Discord shows for this user."""
        if self.discriminator in ('0', '0000'):
            index = (int(self.id) >> 22) % 6
        else:
            index = int(self.discriminator) % 5
        return f'{DEFAULT_AVATAR_URL_BASE}/{index}.png'


@define(slots=True, frozen=True)
class Invite:
    """Represents a public Discord invite."""

    code: str = field(repr=True, kw_only=True)
    """:class:`str`: The invite's code."""

    expires_at: datetime | None = field(repr=True, kw_only=True)
    """Optional[:class:`~datetime.datetime`]: When the invite expires. ``None`` if invite never expires."""

    guild: InviteGuild = field(repr=True, kw_only=True)
    """:class:`.InviteGuild`: The guild this invite points to."""

    channel: InviteChannel = field(repr=True, kw_only=True)
    """:class:`.InviteChannel`: The channel this invite points to."""

    inviter: Inviter | None = field(repr=True, kw_only=True)
    """Optional[:class:`.Inviter`]: The user who created this invite. ``None`` for vanity invites."""

    def __hash__(self) -> int:
        return hash(self.code)

    def __eq__(self, other: object, /) -> bool:
        return self is other or isinstance(other, Invite) and self.code == other.code

    @property
    def permanent(self) -> bool:
        """:class:`bool`: Whether the invite never expires."""
        return self.expires_at is None

    @property
    def url(self) -> str:
        """:class:`str`: The invite link."""
        return f'{INVITE_URL_BASE}/{self.code}'


__all__ = (
    'INVITE_URL_BASE',
    'DEFAULT_AVATAR_URL_BASE',
    'InviteChannel',
    'GuildBadge',
    'InviteGuild',
    'Inviter',
    'Invite',
)
