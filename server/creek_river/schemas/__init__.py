"""Pydantic schemas for request/response validation."""

from .campsite import *  # noqa: F403
from .campsite_type import *  # noqa: F403
from .common import *  # noqa: F403
from .health import *  # noqa: F403
from .reservation import *  # noqa: F403
from .user_profile import *  # noqa: F403
