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

from attrs import define, field

from . import routes
from .enums import ANIMATED_IMAGE_EXTENSION, DEFAULT_IMAGE_EXTENSION, ImageExtension, ResourceType

if typing.TYPE_CHECKING:
    from .routes import HTTPMethod
    from .state import State

_L = logging.getLogger(__name__)

DEFAULT_CDN_BASE: str = 'https://cdn.discordapp.com'

ResolvableExtension = typing.Union[ImageExtension, str]


def resolve_extension(extension: ResolvableExtension, /) -> ImageExtension:
    """Resolves an extension given either as :class:`ImageExtension` or its string value.

    Raises
    ------
    ValueError
        The extension is not supported.
    """
    if isinstance(extension, ImageExtension):
        return extension

    resolved = ImageExtension.try_value(extension.lower())
    if not isinstance(resolved, ImageExtension):
        supported = ', '.join(e.value for e in ImageExtension)
        raise ValueError(f'Unsupported image extension {extension!r}, expected one of: {supported}')
    return resolved


def build_asset_url(
    base: str,
    category: ResourceType,
    owner_id: str,
    hash: str,
    /,
    *,
    size: int | None = None,
    extension: ResolvableExtension = DEFAULT_IMAGE_EXTENSION,
) -> str:
    """Builds a CDN URL.

    The URL has ``{base}/{category}/{owner_id}/{hash}.{extension}[?size={size}]`` format.
    This does not check whether the image exists.

    Parameters
    ----------
    base: :class:`str`
        The CDN base URL, without trailing slash.
    category: :class:`ResourceType`
        The kind of image.
    owner_id: :class:`str`
        The ID of user or guild owning the image.
    hash: :class:`str`
        The image hash.
    size: Optional[:class:`int`]
        The requested size in pixels. Must be positive.
    extension: Union[:class:`ImageExtension`, :class:`str`]
        The file format. Defaults to ``png``.

    Raises
    ------
    ValueError
        The size is not positive, or the extension is not supported.

    Returns
    -------
    :class:`str`
        The URL.
    """
    if size is not None and (isinstance(size, bool) or size <= 0):
        raise ValueError(f'size must be a positive integer, not {size!r}')

    path = routes.CDN_ASSET.compile(
        category=category.value,
        owner_id=owner_id,
        hash=hash,
        extension=resolve_extension(extension).value,
    ).build()

    if size is None:
        return base + path
    return f'{base}{path}?size={size}'


@define(slots=True, frozen=True)
class Asset:
    """Represents an image on Discord CDN, identified by category, owner and hash.

    The URL is computed on every call, nothing is cached.
    """

    state: State = field(repr=False, eq=False, kw_only=True)
    """:class:`.State`: The state that controls this asset."""

    category: ResourceType = field(repr=True, kw_only=True)
    """:class:`.ResourceType`: The kind of image."""

    owner_id: str = field(repr=True, kw_only=True)
    """:class:`str`: The ID of user or guild owning this image."""

    hash: str = field(repr=True, kw_only=True)
    """:class:`str`: The image hash."""

    @property
    def animated(self) -> bool:
        """:class:`bool`: Whether the hash denotes an animated image. Discord prefixes those with ``a_``."""
        return self.hash.startswith('a_')

    def url(
        self,
        *,
        size: int | None = None,
        extension: ResolvableExtension = DEFAULT_IMAGE_EXTENSION,
    ) -> str:
        """Returns the URL of this image in given format.

        .. note::
            If image is not available in requested format (for example, ``gif`` for static avatars),
            Discord answers with JSON error ``Unknown Resource`` instead of image.

        Parameters
        ----------
        size: Optional[:class:`int`]
            The requested size in pixels.
        extension: Union[:class:`ImageExtension`, :class:`str`]
            The file format. Defaults to ``png``.

        Returns
        -------
        :class:`str`
            The URL.
        """
        return build_asset_url(
            self.state.http.cdn_base,
            self.category,
            self.owner_id,
            self.hash,
            size=size,
            extension=extension,
        )

    async def animated_url(
        self,
        *,
        size: int | None = None,
        backup_extension: ResolvableExtension = DEFAULT_IMAGE_EXTENSION,
        method: HTTPMethod = 'HEAD',
    ) -> str:
        """|coro|

        Returns the URL of animated variant of this image, if it exists.

        This checks existence by sending request to the ``gif`` URL, every time this is called.
        Any non-2xx response means the animated variant is absent, and URL in ``backup_extension``
        format is returned instead.

        Parameters
        ----------
        size: Optional[:class:`int`]
            The requested size in pixels.
        backup_extension: Union[:class:`ImageExtension`, :class:`str`]
            The file format to use if animated variant does not exist. Defaults to ``png``.
        method: :class:`str`
            The HTTP method used for checking. Can be ``'HEAD'`` or ``'GET'``. Defaults to ``'HEAD'``.

        Raises
        ------
        TransportError
            The check request could not be completed.
        ValueError
            The size, method or backup extension is invalid.

        Returns
        -------
        :class:`str`
            The URL.
        """
        if method not in ('HEAD', 'GET'):
            raise ValueError(f"method must be 'HEAD' or 'GET', not {method!r}")

        # Validates size and extension before any request is sent
        backup_url = self.url(size=size, extension=backup_extension)

        exists = await self.state.http.probe(self.url(extension=ANIMATED_IMAGE_EXTENSION), method=method)

        _L.debug('Animated variant of %s/%s/%s exists: %s', self.category.value, self.owner_id, self.hash, exists)

        if exists:
            return self.url(size=size, extension=ANIMATED_IMAGE_EXTENSION)
        return backup_url


__all__ = (
    'DEFAULT_CDN_BASE',
    'ResolvableExtension',
    'resolve_extension',
    'build_asset_url',
    'Asset',
)
