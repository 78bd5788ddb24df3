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
import pydantic

from . import raw
from .enums import LATEST_PROTOCOL_VERSION, ProtocolVersion
from .errors import ValidationError
from .utils import parse_dt

_L = logging.getLogger(__name__)

_INVITE_ADAPTERS: dict[ProtocolVersion, pydantic.TypeAdapter[typing.Any]] = {
    ProtocolVersion.v9: pydantic.TypeAdapter(raw.Invite),
}

_token = object()


@define(slots=True, frozen=True, init=False)
class ValidatedInvite:
    """Represents an invite payload that passed validation.

    This can be only obtained from :func:`validate_invite`, and is the only input :class:`.Parser` accepts.
    """

    version: ProtocolVersion = field(repr=True)
    """:class:`.ProtocolVersion`: The protocol version the payload was validated against."""

    payload: raw.Invite = field(repr=False)
    """Dict[:class:`str`, Any]: The validated payload. Unknown keys are stripped."""

    def __init__(self, version: ProtocolVersion, payload: raw.Invite, /, *, token: object = None) -> None:
        if token is not _token:
            raise TypeError('ValidatedInvite can be only created by validate_invite()')
        self.__attrs_init__(version, payload)  # type: ignore


def _format_loc(loc: tuple[int | str, ...], /) -> str:
    return '.'.join(map(str, loc))


def _check_invite_v9(payload: raw.Invite, /) -> list[tuple[str, str]]:
    errors: list[tuple[str, str]] = []

    expires_at = payload.get('expires_at')
    if expires_at is not None:
        try:
            parse_dt(expires_at)
        except ValueError:
            errors.append(('expires_at', f'Input should be a valid ISO 8601 timestamp, got {expires_at!r}'))

    profile = payload['profile']
    member_count = profile['member_count']
    online_count = profile['online_count']

    if online_count < 0:
        errors.append(('profile.online_count', f'Input should be greater than or equal to 0, got {online_count}'))
    if member_count < online_count:
        errors.append(
            (
                'profile.member_count',
                f'Input should be greater than or equal to online count ({online_count}), got {member_count}',
            )
        )

    return errors


_INVITE_CHECKS: dict[ProtocolVersion, typing.Callable[[typing.Any], list[tuple[str, str]]]] = {
    ProtocolVersion.v9: _check_invite_v9,
}


def validate_invite(data: typing.Any, /, *, version: ProtocolVersion = LATEST_PROTOCOL_VERSION) -> ValidatedInvite:
    """Validates decoded JSON against invite payload schema.

    Every documented field must be present with correct type, or explicitly nullable/optional.
    Unknown fields are ignored and stripped from resulting payload.

    Parameters
    ----------
    data: Any
        The decoded JSON value.
    version: :class:`.ProtocolVersion`
        The protocol version to validate against. Defaults to latest version.

    Raises
    ------
    ValidationError
        The data does not match the schema.

    Returns
    -------
    :class:`ValidatedInvite`
        The validated invite payload.
    """
    try:
        adapter = _INVITE_ADAPTERS[version]
    except KeyError:
        raise ValueError(f'No schema is known for protocol version {version!r}') from None

    try:
        payload = adapter.validate_python(data, strict=True)
    except pydantic.ValidationError as exc:
        errors = [(_format_loc(error['loc']), error['msg']) for error in exc.errors()]
        _L.debug('Invite payload failed validation: %s', errors)
        raise ValidationError(errors) from None

    errors = _INVITE_CHECKS[version](payload)
    if errors:
        _L.debug('Invite payload failed validation: %s', errors)
        raise ValidationError(errors)

    return ValidatedInvite(version, payload, token=_token)


__all__ = (
    'ValidatedInvite',
    'validate_invite',
)
