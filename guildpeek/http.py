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

import asyncio
from contextlib import asynccontextmanager
import logging
import typing

import aiohttp
from multidict import CIMultiDict

from . import routes, utils
from .cdn import DEFAULT_CDN_BASE
from .core import UNDEFINED, UndefinedOr, CodeOr, resolve_code, __version__ as version
from .enums import LATEST_PROTOCOL_VERSION, ProtocolVersion
from .errors import (
    DecodeError,
    Forbidden,
    InternalServerError,
    NotFound,
    Ratelimited,
    TransportError,
)
from .schema import ValidatedInvite, validate_invite

if typing.TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from .invite import Invite
    from .routes import HTTPMethod
    from .state import State


DEFAULT_HTTP_USER_AGENT = f'guildpeek (https://github.com/Oignontom8283/discord-guildpeek, {version})'


_L = logging.getLogger(__name__)
_STATUS_TO_ERRORS = {
    403: Forbidden,
    404: NotFound,
    429: Ratelimited,
}


def _error_for(status: int, /) -> type[TransportError]:
    if status >= 500:
        return InternalServerError
    return _STATUS_TO_ERRORS.get(status, TransportError)


def _is_success(status: int, /) -> bool:
    return 200 <= status < 300


class HTTPClient:
    """Represents an HTTP client sending HTTP requests to the Discord API and CDN.

    No authentication is used, only public routes are requested.

    Attributes
    ----------
    state: :class:`State`
        The state.
    user_agent: :class:`str`
        The HTTP user agent used when making requests.
    version: :class:`.ProtocolVersion`
        The Discord API version in use.
    """

    __slots__ = (
        '_base',
        '_cdn_base',
        '_session',
        'state',
        'user_agent',
        'version',
    )

    def __init__(
        self,
        *,
        base: str | None = None,
        cdn_base: str | None = None,
        session: aiohttp.ClientSession | None = None,
        state: State,
        user_agent: str | None = None,
        version: ProtocolVersion = LATEST_PROTOCOL_VERSION,
    ) -> None:
        if base is None:
            base = f'https://discord.com/api/v{version.value}'
        if cdn_base is None:
            cdn_base = DEFAULT_CDN_BASE

        self._base: str = base.rstrip('/')
        self._cdn_base: str = cdn_base.rstrip('/')
        self._session: aiohttp.ClientSession | None = session
        self.state: State = state
        self.user_agent: str = user_agent or DEFAULT_HTTP_USER_AGENT
        self.version: ProtocolVersion = version

    @property
    def base(self) -> str:
        """:class:`str`: The base URL used for API requests."""
        return self._base

    @property
    def cdn_base(self) -> str:
        """:class:`str`: The base URL used for building CDN URLs."""
        return self._cdn_base

    def url_for(self, route: routes.CompiledRoute, /) -> str:
        """Returns a URL for route.

        Parameters
        ----------
        route: :class:`~routes.CompiledRoute`
            The route.

        Returns
        -------
        :class:`str`
            The URL for the route.
        """
        return self._base + route.build()

    def add_headers(
        self,
        headers: CIMultiDict[typing.Any],
        /,
        *,
        accept_json: bool = True,
        user_agent: UndefinedOr[str | None] = UNDEFINED,
    ) -> None:
        if accept_json:
            headers['Accept'] = 'application/json'

        if user_agent is UNDEFINED:
            user_agent = self.user_agent

        if user_agent is not None:
            headers['User-Agent'] = user_agent

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        # A borrowed session is never closed here
        if self._session is not None:
            yield self._session
            return

        async with aiohttp.ClientSession() as session:
            yield session

    async def send_request(
        self,
        session: aiohttp.ClientSession,
        /,
        *,
        method: str,
        url: str,
        headers: CIMultiDict[typing.Any],
        **kwargs,
    ) -> aiohttp.ClientResponse:
        return await session.request(
            method,
            url,
            headers=headers,
            **kwargs,
        )

    async def raw_request(
        self,
        session: aiohttp.ClientSession,
        method: HTTPMethod,
        url: str,
        /,
        *,
        accept_json: bool = True,
        user_agent: UndefinedOr[str | None] = UNDEFINED,
        **kwargs,
    ) -> aiohttp.ClientResponse:
        """|coro|

        Perform a HTTP request. The status code is not checked.

        Parameters
        ----------
        session: :class:`aiohttp.ClientSession`
            The session to send request with.
        method: :class:`str`
            The HTTP method.
        url: :class:`str`
            The full URL.
        accept_json: :class:`bool`
            Whether to explicitly receive JSON or not. Defaults to ``True``.
        user_agent: UndefinedOr[Optional[:class:`str`]]
            The user agent to use for HTTP request. Defaults to :attr:`.user_agent`.

        Raises
        ------
        :class:`TransportError`
            The request could not be completed.

        Returns
        -------
        :class:`aiohttp.ClientResponse`
            The aiohttp response. The caller must close it.
        """
        headers: CIMultiDict[typing.Any] = CIMultiDict(kwargs.pop('headers', {}))
        self.add_headers(headers, accept_json=accept_json, user_agent=user_agent)

        _L.debug('Sending %s to %s params=%s', method, url, kwargs.get('params'))

        try:
            return await self.send_request(
                session,
                method=method,
                url=url,
                headers=headers,
                **kwargs,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            _L.debug('%s %s failed: %r', method, url, exc)
            raise TransportError(None, reason=str(exc) or type(exc).__name__) from exc

    async def request(
        self,
        route: routes.CompiledRoute,
        *,
        accept_json: bool = True,
        user_agent: UndefinedOr[str | None] = UNDEFINED,
        **kwargs,
    ) -> typing.Any:
        """|coro|

        Perform a HTTP request to the API and decode the JSON body.

        Parameters
        ----------
        route: :class:`~routes.CompiledRoute`
            The route.
        accept_json: :class:`bool`
            Whether to explicitly receive JSON or not. Defaults to ``True``.
        user_agent: UndefinedOr[Optional[:class:`str`]]
            The user agent to use for HTTP request. Defaults to :attr:`.user_agent`.

        Raises
        ------
        :class:`TransportError`
            The request could not be completed, or returned non-2xx status code. The body is not read.
        :class:`DecodeError`
            The body is not valid JSON.

        Returns
        -------
        typing.Any
            The decoded JSON response.
        """
        method = route.route.method
        url = self.url_for(route)

        async with self._session_scope() as session:
            response = await self.raw_request(
                session,
                method,
                url,
                accept_json=accept_json,
                user_agent=user_agent,
                **kwargs,
            )
            try:
                if not _is_success(response.status):
                    _L.debug('%s %s has returned %s %s', method, url, response.status, response.reason)
                    raise _error_for(response.status)(response)

                try:
                    body = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                    raise TransportError(response, reason=str(exc) or type(exc).__name__) from exc
            finally:
                response.close()

        try:
            result = utils.from_json(body)
        except ValueError:
            raise DecodeError(body.decode('utf-8', 'replace')) from None

        _L.debug('%s %s has received %s %s', method, url, response.status, result)
        return result

    async def probe(self, url: str, /, *, method: HTTPMethod = 'HEAD') -> bool:
        """|coro|

        Checks whether a resource exists.

        Parameters
        ----------
        url: :class:`str`
            The URL of resource.
        method: :class:`str`
            The HTTP method to use. Can be ``'HEAD'`` or ``'GET'``. Defaults to ``'HEAD'``.

        Raises
        ------
        :class:`TransportError`
            The request could not be completed.

        Returns
        -------
        :class:`bool`
            Whether the resource responded with 2xx status code. The body is never parsed.
        """
        async with self._session_scope() as session:
            response = await self.raw_request(session, method, url, accept_json=False)
            response.close()

        _L.debug('%s %s has returned %s', method, url, response.status)
        return _is_success(response.status)

    async def is_resource_available(self, url: str, /) -> bool:
        """|coro|

        Checks whether a resource is available, using ``HEAD`` request.

        Unlike :meth:`.probe`, this never raises on network errors. They are logged and ``False`` is returned.

        Parameters
        ----------
        url: :class:`str`
            The URL of resource.

        Returns
        -------
        :class:`bool`
            Whether the resource is available.
        """
        try:
            return await self.probe(url)
        except TransportError as exc:
            _L.warning('An error occurred while checking availability of %s: %s', url, exc)
            return False

    async def get_raw_invite(self, code: CodeOr[Invite], /) -> ValidatedInvite:
        """|coro|

        Retrieves an invite, and validates it without transforming.

        Parameters
        ----------
        code: Union[:class:`str`, :class:`.Invite`]
            The invite code.

        Raises
        ------
        :class:`TransportError`
            The request failed, or returned non-2xx status code.
        :class:`NotFound`
            The invite is unknown, or expired.
        :class:`DecodeError`
            The response body is not valid JSON.
        :class:`ValidationError`
            The response does not match invite schema.

        Returns
        -------
        :class:`.ValidatedInvite`
            The validated invite payload.
        """
        data = await self.request(
            routes.INVITES_INVITE_FETCH.compile(invite_code=resolve_code(code)),
            params={'with_counts': 'true', 'with_expiration': 'true'},
        )
        return validate_invite(data, version=self.version)

    async def get_invite(self, code: CodeOr[Invite], /) -> Invite:
        """|coro|

        Retrieves an invite.

        Parameters
        ----------
        code: Union[:class:`str`, :class:`.Invite`]
            The invite code.

        Raises
        ------
        :class:`TransportError`
            The request failed, or returned non-2xx status code.
        :class:`NotFound`
            The invite is unknown, or expired.
        :class:`DecodeError`
            The response body is not valid JSON.
        :class:`ValidationError`
            The response does not match invite schema.

        Returns
        -------
        :class:`.Invite`
            The invite retrieved.
        """
        validated = await self.get_raw_invite(code)
        return self.state.parser.parse_invite(validated)


__all__ = (
    'DEFAULT_HTTP_USER_AGENT',
    'HTTPClient',
)
