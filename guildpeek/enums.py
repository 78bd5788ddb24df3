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

# Thanks Danny https://github.com/Rapptz/discord.py/blob/7d3eff9d9d115dc29b5716c42eaeedf1a008e9b0/discord/enums.py
from __future__ import annotations

from collections import namedtuple
import types
import typing


if typing.TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


def _create_value_cls(name: str, comparable: bool, /):
    # All the type ignores here are due to the type checker being unable to recognise
    # Runtime type creation without exploding.
    cls = namedtuple('_EnumValue_' + name, 'name value')
    cls.__repr__ = lambda self: f'<{name}.{self.name}: {self.value!r}>'  # type: ignore
    cls.__str__ = lambda self: f'{name}.{self.name}'  # type: ignore
    if comparable:
        cls.__le__ = lambda self, other: isinstance(other, self.__class__) and self.value <= other.value  # type: ignore
        cls.__ge__ = lambda self, other: isinstance(other, self.__class__) and self.value >= other.value  # type: ignore
        cls.__lt__ = lambda self, other: isinstance(other, self.__class__) and self.value < other.value  # type: ignore
        cls.__gt__ = lambda self, other: isinstance(other, self.__class__) and self.value > other.value  # type: ignore
    return cls


def _is_descriptor(obj: typing.Any, /) -> bool:
    return hasattr(obj, '__get__') or hasattr(obj, '__set__') or hasattr(obj, '__delete__')


class EnumMeta(type):
    if typing.TYPE_CHECKING:
        __name__: typing.ClassVar[str]  # type: ignore
        _enum_member_names_: typing.ClassVar[list[str]]
        _enum_member_map_: typing.ClassVar[dict[str, typing.Any]]
        _enum_value_map_: typing.ClassVar[dict[typing.Any, typing.Any]]

    def __new__(
        cls,
        name: str,
        bases: tuple[type, ...],
        attrs: dict[str, typing.Any],
        /,
        *,
        comparable: bool = False,
    ) -> EnumMeta:
        value_mapping = {}
        member_mapping = {}
        member_names = []

        value_cls = _create_value_cls(name, comparable)
        for key, value in list(attrs.items()):
            is_descriptor = _is_descriptor(value)
            if key[0] == '_' and not is_descriptor:
                continue

            # Special case classmethod to just pass through
            if isinstance(value, classmethod):
                continue

            if is_descriptor:
                setattr(value_cls, key, value)
                del attrs[key]
                continue

            try:
                new_value = value_mapping[value]
            except KeyError:
                new_value = value_cls(name=key, value=value)
                value_mapping[value] = new_value
                member_names.append(key)

            member_mapping[key] = new_value
            attrs[key] = new_value

        attrs['_enum_value_map_'] = value_mapping
        attrs['_enum_member_map_'] = member_mapping
        attrs['_enum_member_names_'] = member_names
        attrs['_enum_value_cls_'] = value_cls
        actual_cls = super().__new__(cls, name, bases, attrs)
        value_cls._actual_enum_cls_ = actual_cls  # type: ignore # Runtime attribute isn't understood
        return actual_cls

    def __iter__(cls) -> Iterator[typing.Any]:
        return (cls._enum_member_map_[name] for name in cls._enum_member_names_)

    def __reversed__(cls) -> Iterator[typing.Any]:
        return (cls._enum_member_map_[name] for name in reversed(cls._enum_member_names_))

    def __len__(cls) -> int:
        return len(cls._enum_member_names_)

    def __repr__(cls) -> str:
        return f'<enum {cls.__name__}>'

    @property
    def __members__(cls) -> Mapping[str, typing.Any]:
        return types.MappingProxyType(cls._enum_member_map_)

    def __call__(cls, value: str, /) -> typing.Any:
        # try:
        return cls._enum_value_map_[value]
        # except (KeyError, TypeError):
        # raise ValueError(f'{value!r} is not a valid {cls.__name__}')

    def __getitem__(cls, key: str, /) -> typing.Any:
        return cls._enum_member_map_[key]

    def __setattr__(cls, name: str, value: typing.Any, /) -> None:
        raise TypeError('Enums are immutable.')

    def __delattr__(cls, attr: str, /) -> None:
        raise TypeError('Enums are immutable.')

    def __instancecheck__(self, instance: typing.Any, /) -> bool:
        # isinstance(x, Y)
        # -> __instancecheck__(Y, x)
        try:
            return instance._actual_enum_cls_ is self
        except AttributeError:
            return False


if typing.TYPE_CHECKING:
    from enum import Enum
else:

    class Enum(metaclass=EnumMeta):
        @classmethod
        def try_value(cls, value) -> typing.Any:
            try:
                return cls._enum_value_map_[value]
            except (KeyError, TypeError):
                return value


class ProtocolVersion(Enum, comparable=True):
    """The Discord HTTP API versions this library knows a payload schema for."""

    v9 = 9


LATEST_PROTOCOL_VERSION: ProtocolVersion = ProtocolVersion.v9


class ResourceType(Enum):
    """The CDN path segment an image lives under."""

    avatars = 'avatars'
    """A user avatar."""

    banners = 'banners'
    """A user (or guild) banner."""

    icons = 'icons'
    """A guild icon."""

    splashes = 'splashes'
    """A guild invite splash, exposed as the guild banner."""


class ImageExtension(Enum):
    webp = 'webp'
    png = 'png'
    jpg = 'jpg'
    jpeg = 'jpeg'
    gif = 'gif'


DEFAULT_IMAGE_EXTENSION: ImageExtension = ImageExtension.png
ANIMATED_IMAGE_EXTENSION: ImageExtension = ImageExtension.gif


class ChannelType(Enum):
    text = 0
    dm = 1
    voice = 2
    group = 3
    category = 4
    news = 5
    news_thread = 10
    public_thread = 11
    private_thread = 12
    stage_voice = 13
    directory = 14
    forum = 15
    media = 16


class VerificationLevel(Enum, comparable=True):
    none = 0
    low = 1
    medium = 2
    high = 3
    highest = 4


class NSFWLevel(Enum, comparable=True):
    default = 0
    explicit = 1
    safe = 2
    age_restricted = 3


class PremiumTier(Enum, comparable=True):
    none = 0
    tier_1 = 1
    tier_2 = 2
    tier_3 = 3


__all__ = (
    'EnumMeta',
    'Enum',
    'ProtocolVersion',
    'LATEST_PROTOCOL_VERSION',
    'ResourceType',
    'ImageExtension',
    'DEFAULT_IMAGE_EXTENSION',
    'ANIMATED_IMAGE_EXTENSION',
    'ChannelType',
    'VerificationLevel',
    'NSFWLevel',
    'PremiumTier',
)
