from __future__ import annotations

from aiohttp import web
from aiohttp.test_utils import unused_port
import copy
import json
import os
import pytest
import pytest_asyncio
import guildpeek

DATA = os.path.join(os.path.dirname(__file__), 'data')

with open(os.path.join(DATA, 'invites', 'full.json'), 'r', encoding='utf-8') as fp:
    full_invite = json.load(fp)

with open(os.path.join(DATA, 'invites', 'vanity.json'), 'r', encoding='utf-8') as fp:
    vanity_invite = json.load(fp)


malformed_invite = copy.deepcopy(full_invite)
del malformed_invite['guild']['name']
malformed_invite['channel']['type'] = 'text'

PAYLOADS = {
    'abc123': full_invite,
    'guildpeek': vanity_invite,
    'malformed': malformed_invite,
}

REQUESTS = web.AppKey('requests', list)

routes = web.RouteTableDef()


@routes.get('/api/v9/invites/{code}')
async def get_invite(request: web.Request) -> web.Response:
    request.app[REQUESTS].append(request)

    code = request.match_info['code']
    if code == 'broken':
        return web.Response(text='<html>Cloudflare</html>', content_type='text/html')
    if code == 'banned':
        return web.json_response({'message': 'You are being blocked', 'code': 0}, status=403, reason='Forbidden')
    if code == 'oops':
        return web.Response(status=502, reason='Bad Gateway')

    try:
        payload = PAYLOADS[code]
    except KeyError:
        return web.json_response({'message': 'Unknown Invite', 'code': 10006}, status=404)
    return web.json_response(payload)


@routes.get('/cdn/{category}/{owner_id}/{filename}')
async def get_asset(request: web.Request) -> web.Response:
    request.app[REQUESTS].append(request)

    filename = request.match_info['filename']
    hash, _, extension = filename.rpartition('.')

    if extension == 'gif' and not hash.startswith('a_'):
        # Discord answers with JSON error instead of 404 there
        return web.json_response({'message': 'Unknown Resource', 'code': 10000}, status=415)
    if hash == 'missing':
        return web.Response(status=404)

    return web.Response(body=b'GIF89a' if extension == 'gif' else b'\x89PNG', content_type=f'image/{extension}')


class LocalDiscord:
    def __init__(self, app: web.Application, port: int) -> None:
        self.app = app
        self.origin = f'http://127.0.0.1:{port}'

    @property
    def base(self) -> str:
        return f'{self.origin}/api/v9'

    @property
    def cdn_base(self) -> str:
        return f'{self.origin}/cdn'

    @property
    def requests(self) -> list[web.Request]:
        return self.app[REQUESTS]

    def client(self) -> guildpeek.Client:
        return guildpeek.Client(base=self.base, cdn_base=self.cdn_base)


@pytest_asyncio.fixture
async def discord():
    app = web.Application()
    app[REQUESTS] = []
    app.add_routes(routes)

    runner = web.AppRunner(app)
    await runner.setup()

    port = unused_port()
    site = web.TCPSite(runner, host='127.0.0.1', port=port)
    await site.start()

    try:
        yield LocalDiscord(app, port)
    finally:
        await runner.cleanup()


@pytest.fixture
def state() -> guildpeek.State:
    state = guildpeek.State()
    state.setup(http=guildpeek.HTTPClient(state=state))
    return state


@pytest.fixture
def full_payload() -> dict:
    return copy.deepcopy(full_invite)


@pytest.fixture
def vanity_payload() -> dict:
    return copy.deepcopy(vanity_invite)
