from __future__ import annotations

import aiohttp
import argparse
import asyncio
import attrs
import platform
import pydantic
import guildpeek
import logging
import sys
import typing


def show_version() -> None:
    entries = []

    entries.append('- Python v{0.major}.{0.minor}.{0.micro}-{0.releaselevel}'.format(sys.version_info))
    entries.append('- guildpeek v{}'.format(guildpeek.__version__))

    entries.append(f'- aiohttp v{aiohttp.__version__}')
    entries.append(f'- attrs v{attrs.__version__}')
    entries.append(f'- pydantic v{pydantic.VERSION}')
    uname = platform.uname()
    entries.append('- system info: {0.system} {0.release} {0.version}'.format(uname))
    print('\n'.join(entries))


async def asset_url(asset: guildpeek.Asset | None, *, size: int | None, animated: bool) -> str | None:
    if asset is None:
        return None
    if animated:
        return await asset.animated_url(size=size)
    return asset.url(size=size)


async def invite_to_dict(invite: guildpeek.Invite, *, size: int | None, animated: bool) -> dict[str, typing.Any]:
    guild = invite.guild
    inviter = invite.inviter

    result: dict[str, typing.Any] = {
        'code': invite.code,
        'url': invite.url,
        'expires_at': None if invite.expires_at is None else invite.expires_at.isoformat(),
        'guild': {
            'id': guild.id,
            'name': guild.name,
            'description': guild.description,
            'members': guild.members,
            'onlines': guild.onlines,
            'icon': await asset_url(guild.icon, size=size, animated=animated),
            'banner': await asset_url(guild.banner, size=size, animated=animated),
            'features': guild.features,
            'verification_level': guild.verification_level,
            'nsfw_level': guild.nsfw_level,
            'nsfw': guild.nsfw,
            'premium_tier': guild.premium_tier,
            'premium_subscription_count': guild.premium_subscription_count,
            'vanity_url': guild.vanity_url,
            'tag': guild.tag,
            'badge': attrs.asdict(guild.badge),
            'traits': guild.traits,
            'visibility': guild.visibility,
        },
        'channel': attrs.asdict(invite.channel),
        'inviter': None,
    }

    if inviter is not None:
        result['inviter'] = {
            'id': inviter.id,
            'username': inviter.username,
            'global_name': inviter.global_name,
            'discriminator': inviter.discriminator,
            'flags': inviter.flags,
            'public_flags': inviter.public_flags,
            'accent_color': inviter.accent_color,
            'banner_color': inviter.banner_color,
            'avatar': await asset_url(inviter.avatar, size=size, animated=animated) or inviter.default_avatar_url,
            'banner': await asset_url(inviter.banner, size=size, animated=animated),
        }

    return result


def print_invite(data: dict[str, typing.Any]) -> None:
    guild = data['guild']
    print(f"{guild['name']} ({guild['id']})")
    if guild['description']:
        print(guild['description'])
    print(f"Members: {guild['members']} ({guild['onlines']} online)")
    print(f"Channel: #{data['channel']['name']} ({data['channel']['id']})")
    print(f"Expires at: {data['expires_at'] or 'never'}")

    inviter = data['inviter']
    if inviter:
        print(f"Inviter: {inviter['global_name'] or inviter['username']} (@{inviter['username']})")

    if guild['icon']:
        print('Icon:', guild['icon'])
    if guild['banner']:
        print('Banner:', guild['banner'])
    if guild['features']:
        print('Features:', ', '.join(guild['features']))


async def lookup(target: str, *, size: int | None, animated: bool, as_json: bool) -> int:
    try:
        code = guildpeek.extract_invite_code(target) if target.startswith(('http://', 'https://')) else target
        invite = await guildpeek.fetch_invite(code)
        data = await invite_to_dict(invite, size=size, animated=animated)
    except (guildpeek.GuildpeekError, ValueError) as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1

    if as_json:
        print(guildpeek.utils.to_json(data))
    else:
        print_invite(data)
    return 0


def _lookup(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.debug:
        guildpeek.utils.setup_logging(level=logging.DEBUG, root=False)
    sys.exit(asyncio.run(lookup(args.invite, size=args.size, animated=args.animated, as_json=args.json)))


def add_lookup_args(subparser: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparser.add_parser('lookup', help='show public information about invite')
    parser.set_defaults(func=_lookup)

    parser.add_argument('invite', help='invite code or link')
    parser.add_argument('--size', type=int, required=False, help='image size in pixels')
    parser.add_argument('--animated', action='store_true', help='prefer animated images when available')
    parser.add_argument('--json', action='store_true', help='print as JSON')
    parser.add_argument('--debug', action='store_true', help='log HTTP requests')


def core(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.version:
        show_version()
    else:
        parser.print_help()


def parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog='guildpeek', description='Peek into Discord guilds using invites')
    parser.add_argument('-v', '--version', action='store_true', help='shows the library version')
    parser.set_defaults(func=core)

    subparser = parser.add_subparsers(dest='subcommand', title='subcommands')
    add_lookup_args(subparser)

    return parser, parser.parse_args(argv)


def main() -> None:
    parser, args = parse_args()
    args.func(parser, args)


if __name__ == '__main__':
    main()
