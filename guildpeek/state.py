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

from .parser import Parser

if typing.TYPE_CHECKING:
    from .http import HTTPClient


class State:
    """Represents a manager for all guildpeek objects.

    Attributes
    ----------
    parser: :class:`Parser`
        The parser.
    """

    __slots__ = (
        '_http',
        'parser',
    )

    def __init__(
        self,
        *,
        http: HTTPClient | None = None,
        parser: Parser | None = None,
    ) -> None:
        self._http = http
        self.parser = parser if parser else Parser(state=self)

    def setup(
        self,
        *,
        http: HTTPClient | None = None,
        parser: Parser | None = None,
    ) -> State:
        if http:
            self._http = http
        if parser:
            self.parser = parser
        return self

    @property
    def http(self) -> HTTPClient:
        assert self._http, 'State has no HTTP client attached'
        return self._http


__all__ = ('State',)
