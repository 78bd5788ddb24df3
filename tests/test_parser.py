from __future__ import annotations

from datetime import datetime, timezone

import pytest
import guildpeek


def parse(state: guildpeek.State, payload: dict) -> guildpeek.Invite:
    return state.parser.parse_invite(guildpeek.validate_invite(payload))


def test_parse_full(state: guildpeek.State, full_payload: dict):
    invite = parse(state, full_payload)

    assert invite.code == 'abc123'
    assert invite.url == 'https://discord.gg/abc123'
    assert invite.expires_at == datetime(2025, 7, 20, 12, 30, tzinfo=timezone.utc)
    assert not invite.permanent

    channel = invite.channel
    assert channel.id == '1081876840270139422'
    assert channel.name == 'welcome'
    assert channel.type == 0
    assert channel.kind is guildpeek.ChannelType.text

    guild = invite.guild
    assert guild.id == '1081876839427063808'
    assert guild.name == 'Guild Peek'
    assert guild.description == 'A place to peek at guilds.'
    assert guild.members == 1520
    assert guild.onlines == 318
    assert guild.features == ['COMMUNITY', 'INVITE_SPLASH', 'ANIMATED_ICON', 'NEWS']
    assert guild.has_feature('COMMUNITY')
    assert not guild.has_feature('VERIFIED')
    assert guild.verification_level == 2
    assert guild.nsfw_level == 0
    assert guild.nsfw is False
    assert guild.premium_tier == 2
    assert guild.premium_subscription_count == 14
    assert guild.vanity_url is None
    assert guild.tag == 'PEEK'
    assert guild.badge == guildpeek.GuildBadge(
        count=7,
        color_primary='#ff0000',
        color_secondary='#800000',
        hash='2d2d0f6e1c2a40a3b8d1a5c6e3f4b7a9',
    )
    assert guild.traits == full_payload['profile']['traits']
    assert guild.visibility == 1

    assert guild.icon is not None
    assert guild.icon.category is guildpeek.ResourceType.icons
    assert guild.icon.owner_id == guild.id
    assert guild.icon.animated

    # Invite splash has priority over guild banner
    assert guild.banner is not None
    assert guild.banner.category is guildpeek.ResourceType.splashes
    assert guild.banner.hash == '7b1c4d5e6f708192a3b4c5d6e7f80912'
    assert (
        guild.banner.url()
        == 'https://cdn.discordapp.com/splashes/1081876839427063808/7b1c4d5e6f708192a3b4c5d6e7f80912.png'
    )

    inviter = invite.inviter
    assert inviter is not None
    assert inviter.id == '256444020413300736'
    assert inviter.username == 'nium'
    assert inviter.global_name == 'Nium'
    assert inviter.display_name == 'Nium'
    assert inviter.discriminator == '0'
    assert inviter.flags == 4194368
    assert inviter.public_flags == 4194368
    assert inviter.accent_color == 5793266
    assert inviter.banner_color == '#586ef2'
    assert inviter.avatar is not None
    assert inviter.avatar.category is guildpeek.ResourceType.avatars
    assert inviter.avatar.owner_id == inviter.id
    assert inviter.banner is not None
    assert inviter.banner.category is guildpeek.ResourceType.banners
    assert not inviter.banner.animated


def test_parse_vanity(state: guildpeek.State, vanity_payload: dict):
    invite = parse(state, vanity_payload)

    assert invite.code == 'guildpeek'
    assert invite.expires_at is None
    assert invite.permanent
    assert invite.inviter is None

    guild = invite.guild
    assert guild.icon is None
    assert guild.banner is None
    assert guild.description is None
    assert guild.vanity_url == 'guildpeek'
    assert guild.members == 3
    assert guild.onlines == 0


def test_parse_guild_banner_without_splash(state: guildpeek.State, full_payload: dict):
    full_payload['guild']['splash'] = None

    banner = parse(state, full_payload).guild.banner
    assert banner is not None
    assert banner.category is guildpeek.ResourceType.banners
    assert banner.hash == 'c0ffee00c0ffee00c0ffee00c0ffee00'


def test_parse_absent_expiration(state: guildpeek.State, full_payload: dict):
    del full_payload['expires_at']
    assert parse(state, full_payload).expires_at is None


def test_parse_zulu_expiration(state: guildpeek.State, full_payload: dict):
    full_payload['expires_at'] = '2025-02-03T19:39:34.263Z'

    expires_at = parse(state, full_payload).expires_at
    assert expires_at == datetime(2025, 2, 3, 19, 39, 34, 263000, tzinfo=timezone.utc)


@pytest.mark.parametrize('global_name', [None, ''])
def test_parse_inviter_without_global_name(state: guildpeek.State, full_payload: dict, global_name: str | None):
    full_payload['inviter']['global_name'] = global_name

    inviter = parse(state, full_payload).inviter
    assert inviter is not None
    assert inviter.global_name == ''
    assert inviter.display_name == 'nium'


def test_parse_inviter_absent_global_name(state: guildpeek.State, full_payload: dict):
    del full_payload['inviter']['global_name']

    inviter = parse(state, full_payload).inviter
    assert inviter is not None
    assert inviter.global_name == ''


def test_parse_inviter_without_images(state: guildpeek.State, full_payload: dict):
    full_payload['inviter']['avatar'] = None
    full_payload['inviter']['banner'] = None

    inviter = parse(state, full_payload).inviter
    assert inviter is not None
    assert inviter.avatar is None
    assert inviter.banner is None
    assert inviter.default_avatar_url == 'https://cdn.discordapp.com/embed/avatars/{}.png'.format(
        (256444020413300736 >> 22) % 6
    )


def test_parse_legacy_discriminator(state: guildpeek.State, full_payload: dict):
    full_payload['inviter']['discriminator'] = '1337'

    inviter = parse(state, full_payload).inviter
    assert inviter is not None
    assert inviter.default_avatar_url == 'https://cdn.discordapp.com/embed/avatars/2.png'


def test_parse_null_inviter(state: guildpeek.State, full_payload: dict):
    full_payload['inviter'] = None
    assert parse(state, full_payload).inviter is None


def test_unknown_enum_values_are_kept(state: guildpeek.State, full_payload: dict):
    full_payload['channel']['type'] = 1337
    full_payload['guild']['verification_level'] = 99

    invite = parse(state, full_payload)
    assert invite.channel.kind == 1337
    assert invite.guild.verification == 99
    assert invite.guild.boost_tier is guildpeek.PremiumTier.tier_2


def test_invite_equality(state: guildpeek.State, full_payload: dict):
    first = parse(state, full_payload)

    full_payload['profile']['online_count'] = 1
    second = parse(state, full_payload)

    assert first == second
    assert len({first, second}) == 1

    # Guild snapshots are identified by guild ID
    assert first.guild.onlines != second.guild.onlines
    assert first.guild == second.guild
    assert hash(first.guild) == hash(second.guild)
    assert len({first.guild, second.guild}) == 1


def test_guild_is_hashable(state: guildpeek.State, full_payload: dict, vanity_payload: dict):
    vanity_payload['guild']['id'] = '1081876839427063809'

    full = parse(state, full_payload).guild
    vanity = parse(state, vanity_payload).guild

    guilds = {full: 'full', vanity: 'vanity'}
    assert len(guilds) == 2
    assert guilds[full] == 'full'
    assert guilds[vanity] == 'vanity'
    assert full != vanity


def test_parse_asset_without_hash(state: guildpeek.State):
    assert state.parser.parse_asset(guildpeek.ResourceType.icons, '1', None) is None
