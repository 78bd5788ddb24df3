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

import logging
import typing

from .enums import LATEST_PROTOCOL_VERSION, ProtocolVersion
from .http import HTTPClient
from .state import State

if typing.TYPE_CHECKING:
    import aiohttp

    from .core import CodeOr
    from .invite import Invite
    from .schema import ValidatedInvite

_L = logging.getLogger(__name__)


class Client:
    """A client for looking up public information of Discord invites.

    No token is needed.

    .. note::
        If ``session`` is not passed, every request opens and closes its own session,
        so nothing needs to be cleaned up. If it is passed, the caller owns it.

    Parameters
    ----------
    base: Optional[:class:`str`]
        The base API URL. Defaults to ``https://discord.com/api/v{version}``.
    cdn_base: Optional[:class:`str`]
        The base CDN URL. Defaults to ``https://cdn.discordapp.com``.
    session: Optional[:class:`aiohttp.ClientSession`]
        The session to use for requests.
    user_agent: Optional[:class:`str`]
        The HTTP user agent.
    version: :class:`.ProtocolVersion`
        The Discord API version to use. Defaults to latest known version.
    """

    __slots__ = ('_state',)

    def __init__(
        self,
        *,
        base: str | None = None,
        cdn_base: str | None = None,
        session: aiohttp.ClientSession | None = None,
        user_agent: str | None = None,
        version: ProtocolVersion = LATEST_PROTOCOL_VERSION,
    ) -> None:
        state = State()
        http = HTTPClient(
            base=base,
            cdn_base=cdn_base,
            session=session,
            state=state,
            user_agent=user_agent,
            version=version,
        )
        self._state: State = state.setup(http=http)

    @property
    def state(self) -> State:
        """:class:`.State`: The state used by this client."""
        return self._state

    @property
    def http(self) -> HTTPClient:
        """:class:`.HTTPClient`: The HTTP client used by this client."""
        return self._state.http

    async def fetch_invite(self, code: CodeOr[Invite], /) -> Invite:
        """|coro|

        Retrieves an invite. This is same as :meth:`HTTPClient.get_invite`.

        Parameters
        ----------
        code: Union[:class:`str`, :class:`.Invite`]
            The invite code. Use :func:`.extract_invite_code` to get one from invite link.

        Raises
        ------
        :class:`TransportError`
            The request failed, or returned non-2xx status code.
        :class:`DecodeError`
            The response body is not valid JSON.
        :class:`ValidationError`
            The response does not match invite schema.

        Returns
        -------
        :class:`.Invite`
            The invite retrieved.
        """
        return await self.http.get_invite(code)

    async def fetch_raw_invite(self, code: CodeOr[Invite], /) -> ValidatedInvite:
        """|coro|

        Retrieves an invite without transforming it. This is same as :meth:`HTTPClient.get_raw_invite`.
        """
        return await self.http.get_raw_invite(code)

    async def is_resource_available(self, url: str, /) -> bool:
        """|coro|

        Checks whether a resource is available. This is same as :meth:`HTTPClient.is_resource_available`.
        """
        return await self.http.is_resource_available(url)


async def fetch_invite_v9(
    code: str,
    /,
    *,
    base: str | None = None,
    cdn_base: str | None = None,
    session: aiohttp.ClientSession | None = None,
) -> Invite:
    """|coro|

    Retrieves an invite using Discord API v9.

    Parameters
    ----------
    code: :class:`str`
        The invite code.
    base: Optional[:class:`str`]
        The base API URL. Defaults to ``https://discord.com/api/v9``.
    cdn_base: Optional[:class:`str`]
        The base CDN URL. Defaults to ``https://cdn.discordapp.com``.
    session: Optional[:class:`aiohttp.ClientSession`]
        The session to use. If not passed, a session is opened for each request.

    Raises
    ------
    :class:`TransportError`
        The request failed, or returned non-2xx status code.
    :class:`DecodeError`
        The response body is not valid JSON.
    :class:`ValidationError`
        The response does not match invite schema.

    Returns
    -------
    :class:`.Invite`
        The invite retrieved.
    """
    client = Client(base=base, cdn_base=cdn_base, session=session, version=ProtocolVersion.v9)
    return await client.fetch_invite(code)


async def fetch_invite(
    code: str,
    /,
    *,
    base: str | None = None,
    cdn_base: str | None = None,
    session: aiohttp.ClientSession | None = None,
) -> Invite:
    """|coro|

    Retrieves an invite using latest Discord API version known to the library.

    For stable behavior across library upgrades, use version-specific functions like :func:`.fetch_invite_v9`.

    Parameters
    ----------
    code: :class:`str`
        The invite code.
    base: Optional[:class:`str`]
        The base API URL. Defaults to ``https://discord.com/api/v9``.
    cdn_base: Optional[:class:`str`]
        The base CDN URL. Defaults to ``https://cdn.discordapp.com``.
    session: Optional[:class:`aiohttp.ClientSession`]
        The session to use. If not passed, a session is opened for each request.

    Raises
    ------
    :class:`TransportError`
        The request failed, or returned non-2xx status code.
    :class:`DecodeError`
        The response body is not valid JSON.
    :class:`ValidationError`
        The response does not match invite schema.

    Returns
    -------
    :class:`.Invite`
        The invite retrieved.
    """
    _L.debug('Fetching invite %s with protocol %s', code, LATEST_PROTOCOL_VERSION)
    return await _VERSIONED_FETCHERS[LATEST_PROTOCOL_VERSION](code, base=base, cdn_base=cdn_base, session=session)


async def is_resource_available(url: str, /, *, session: aiohttp.ClientSession | None = None) -> bool:
    """|coro|

    Checks whether a resource is available, using ``HEAD`` request. Network errors are logged and
    ``False`` is returned.

    Parameters
    ----------
    url: :class:`str`
        The URL of resource.
    session: Optional[:class:`aiohttp.ClientSession`]
        The session to use.

    Returns
    -------
    :class:`bool`
        Whether the resource responded with 2xx status code.
    """
    return await Client(session=session).is_resource_available(url)


_VERSIONED_FETCHERS = {
    ProtocolVersion.v9: fetch_invite_v9,
}

__all__ = (
    'Client',
    'fetch_invite_v9',
    'fetch_invite',
    'is_resource_available',
)
