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

if typing.TYPE_CHECKING:
    from aiohttp import ClientResponse as Response


class GuildpeekError(Exception):
    """Base exception class for guildpeek

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    __slots__ = ()


class TransportError(GuildpeekError):
    """Exception that's raised when an HTTP request could not be completed,
    or completed with a non-2xx status.

    Attributes
    ------------
    response: Optional[:class:`aiohttp.ClientResponse`]
        The response of the failed HTTP request. ``None`` if the request
        never received a response (connection refused, DNS failure, etc.).
    status: Optional[:class:`int`]
        The status code of the HTTP request, if any.
    reason: :class:`str`
        The HTTP status text, or a description of the transport failure.
    """

    __slots__ = (
        'response',
        'status',
        'reason',
    )

    def __init__(
        self,
        response: Response | None,
        /,
        *,
        reason: str | None = None,
    ) -> None:
        self.response: Response | None = response
        self.status: int | None = None if response is None else response.status

        if reason is None:
            reason = (response and response.reason) or 'Unknown'
        self.reason: str = reason

        if self.status is None:
            super().__init__(f'Request failed: {reason}')
        else:
            super().__init__(f'Request failed with {self.status}: {reason}')


class Forbidden(TransportError):
    __slots__ = ()


class NotFound(TransportError):
    __slots__ = ()


class Ratelimited(TransportError):
    __slots__ = ()


class InternalServerError(TransportError):
    __slots__ = ()


class DecodeError(GuildpeekError):
    """Exception that's raised when a successful response body is not valid JSON.

    Attributes
    ----------
    data: :class:`str`
        The raw response body.
    """

    __slots__ = ('data',)

    def __init__(self, data: str, /) -> None:
        self.data: str = data
        super().__init__(f'Unable to decode response body as JSON (raw={data[:200]!r})')


class ValidationError(GuildpeekError):
    """Exception that's raised when the decoded payload does not match
    the expected shape for the requested protocol version.

    Attributes
    ----------
    errors: List[Tuple[:class:`str`, :class:`str`]]
        The defects found, as ``(path, message)`` pairs. The path is dot-separated,
        for example ``guild.features.0``.
    """

    __slots__ = ('errors',)

    def __init__(self, errors: list[tuple[str, str]], /) -> None:
        self.errors: list[tuple[str, str]] = errors
        details = '\n'.join(f'  {path or "<root>"}: {message}' for path, message in errors)
        super().__init__(f'Invalid data structure, {len(errors)} error(s):\n{details}')


class InvalidInputError(GuildpeekError, ValueError):
    """Exception that's raised when a supplied value, like an invite link,
    is not something the library can work with. This inherits from :exc:`ValueError`.
    """

    __slots__ = ('value',)

    def __init__(self, value: typing.Any, message: str, /) -> None:
        self.value: typing.Any = value
        super().__init__(message)


__all__ = (
    'GuildpeekError',
    'TransportError',
    'Forbidden',
    'NotFound',
    'Ratelimited',
    'InternalServerError',
    'DecodeError',
    'ValidationError',
    'InvalidInputError',
)
