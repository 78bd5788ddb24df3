"""
Discord Guild Peek
~~~~~~~~~~~~~~~~~~~

Get a public preview of a Discord server from its invite code, without authentication.

:copyright: (c) 2025-present Oignontom8283
:license: MIT, see LICENSE for more details.

"""

from . import (
    routes as routes,
    utils as utils,
)

from .cdn import *
from .client import *
from .core import *
from .enums import *
from .errors import *
from .http import *
from .invite import *
from .parser import *
from .schema import *
from .state import *
from .utils import *

import typing

if typing.TYPE_CHECKING:
    from . import raw as raw

del typing
