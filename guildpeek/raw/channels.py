from __future__ import annotations

import typing_extensions


class InviteChannel(typing_extensions.TypedDict):
    id: str
    type: int
    name: str
