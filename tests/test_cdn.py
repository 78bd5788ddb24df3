from __future__ import annotations

from aiohttp.test_utils import unused_port
import pytest
import guildpeek


def test_build_asset_url():
    url = guildpeek.build_asset_url(
        'https://cdn.discordapp.com',
        guildpeek.ResourceType.icons,
        '1081876839427063808',
        'a_9a8b7c6d5e4f30211a2b3c4d5e6f7081',
    )
    assert url == 'https://cdn.discordapp.com/icons/1081876839427063808/a_9a8b7c6d5e4f30211a2b3c4d5e6f7081.png'

    url = guildpeek.build_asset_url(
        'https://cdn.discordapp.com',
        guildpeek.ResourceType.splashes,
        '1081876839427063808',
        '7b1c4d5e6f708192a3b4c5d6e7f80912',
        size=512,
        extension='webp',
    )
    assert url == 'https://cdn.discordapp.com/splashes/1081876839427063808/7b1c4d5e6f708192a3b4c5d6e7f80912.webp?size=512'


def test_asset_url(state: guildpeek.State):
    asset = guildpeek.Asset(
        state=state,
        category=guildpeek.ResourceType.avatars,
        owner_id='256444020413300736',
        hash='0d9e8f7a6b5c4d3e2f1a0b9c8d7e6f5a',
    )

    url = asset.url()
    assert url == asset.url()
    assert url.endswith('.png')
    assert '?size=' not in url
    assert url == 'https://cdn.discordapp.com/avatars/256444020413300736/0d9e8f7a6b5c4d3e2f1a0b9c8d7e6f5a.png'

    assert asset.url(size=64).endswith('.png?size=64')
    assert asset.url(extension=guildpeek.ImageExtension.jpg).endswith('.jpg')
    assert asset.url(size=4096, extension='GIF').endswith('.gif?size=4096')
    assert not asset.animated


@pytest.mark.parametrize('size', [0, -16, True])
def test_asset_url_rejects_bad_size(state: guildpeek.State, size):
    asset = guildpeek.Asset(state=state, category=guildpeek.ResourceType.icons, owner_id='1', hash='abc')
    with pytest.raises(ValueError):
        asset.url(size=size)


def test_asset_url_rejects_unknown_extension(state: guildpeek.State):
    asset = guildpeek.Asset(state=state, category=guildpeek.ResourceType.icons, owner_id='1', hash='abc')
    with pytest.raises(ValueError):
        asset.url(extension='svg')


def test_asset_equality(state: guildpeek.State):
    a = guildpeek.Asset(state=state, category=guildpeek.ResourceType.icons, owner_id='1', hash='a_abc')
    b = guildpeek.Asset(state=guildpeek.State(), category=guildpeek.ResourceType.icons, owner_id='1', hash='a_abc')
    assert a == b
    assert a.animated


@pytest.mark.asyncio
async def test_animated_url_exists(discord):
    client = discord.client()
    asset = guildpeek.Asset(
        state=client.state,
        category=guildpeek.ResourceType.icons,
        owner_id='1081876839427063808',
        hash='a_9a8b7c6d5e4f30211a2b3c4d5e6f7081',
    )

    url = await asset.animated_url()
    assert url == f'{discord.cdn_base}/icons/1081876839427063808/a_9a8b7c6d5e4f30211a2b3c4d5e6f7081.gif'

    url = await asset.animated_url(size=256, method='GET')
    assert url == f'{discord.cdn_base}/icons/1081876839427063808/a_9a8b7c6d5e4f30211a2b3c4d5e6f7081.gif?size=256'

    probes = [request for request in discord.requests if request.path.startswith('/cdn/')]
    assert [request.method for request in probes] == ['HEAD', 'GET']
    # The probe is made without size
    assert all(not request.query for request in probes)


@pytest.mark.asyncio
async def test_animated_url_falls_back(discord):
    client = discord.client()
    asset = guildpeek.Asset(
        state=client.state,
        category=guildpeek.ResourceType.avatars,
        owner_id='256444020413300736',
        hash='0d9e8f7a6b5c4d3e2f1a0b9c8d7e6f5a',
    )

    url = await asset.animated_url()
    assert url == f'{discord.cdn_base}/avatars/256444020413300736/0d9e8f7a6b5c4d3e2f1a0b9c8d7e6f5a.png'

    url = await asset.animated_url(size=128, backup_extension='webp')
    assert url == f'{discord.cdn_base}/avatars/256444020413300736/0d9e8f7a6b5c4d3e2f1a0b9c8d7e6f5a.webp?size=128'

    # Not cached, every call probes again
    assert len(discord.requests) == 2


@pytest.mark.asyncio
async def test_animated_url_rejects_bad_input_before_probing(discord):
    client = discord.client()
    asset = guildpeek.Asset(state=client.state, category=guildpeek.ResourceType.icons, owner_id='1', hash='a_abc')

    with pytest.raises(ValueError):
        await asset.animated_url(method='POST')  # type: ignore

    with pytest.raises(ValueError):
        await asset.animated_url(backup_extension='bmp')

    with pytest.raises(ValueError):
        await asset.animated_url(size=0)

    assert discord.requests == []


@pytest.mark.asyncio
async def test_animated_url_propagates_transport_errors():
    client = guildpeek.Client(cdn_base=f'http://127.0.0.1:{unused_port()}')
    asset = guildpeek.Asset(state=client.state, category=guildpeek.ResourceType.icons, owner_id='1', hash='a_abc')

    with pytest.raises(guildpeek.TransportError) as exc_info:
        await asset.animated_url()

    assert exc_info.value.status is None
    assert exc_info.value.response is None
