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
from urllib.parse import quote

HTTPMethod = typing.Literal['GET', 'HEAD']


class CompiledRoute:
    """Represents compiled Discord route."""

    __slots__ = ('route', 'args')

    def __init__(self, route: Route, /, **args: typing.Any) -> None:
        self.route: Route = route
        self.args: dict[str, typing.Any] = args

    def __repr__(self) -> str:
        return f'<CompiledRoute route={self.route!r} args={self.args!r}>'

    def __str__(self) -> str:
        return f'CompiledRoute({self.route}, **{self.args!r})'

    def build(self) -> str:
        return self.route.path.format_map({k: quote(str(v), safe='') for k, v in self.args.items()})


class Route:
    """Represents Discord route, either on API or CDN host."""

    __slots__ = (
        'method',
        'path',
    )

    def __init__(self, method: HTTPMethod, path: str, /) -> None:
        self.method: HTTPMethod = method
        self.path: str = path

    def __repr__(self) -> str:
        return f'<Route method={self.method!r} path={self.path!r}>'

    def __str__(self) -> str:
        return f'{self.method} {self.path}'

    def compile(self, **args: typing.Any) -> CompiledRoute:
        """Compiles route."""
        return CompiledRoute(self, **args)


GET: typing.Final[HTTPMethod] = 'GET'
HEAD: typing.Final[HTTPMethod] = 'HEAD'

INVITES_INVITE_FETCH: typing.Final[Route] = Route(GET, '/invites/{invite_code}')

# CDN
CDN_ASSET: typing.Final[Route] = Route(GET, '/{category}/{owner_id}/{hash}.{extension}')

__all__ = (
    'HTTPMethod',
    'CompiledRoute',
    'Route',
    'GET',
    'HEAD',
    'INVITES_INVITE_FETCH',
    'CDN_ASSET',
)
