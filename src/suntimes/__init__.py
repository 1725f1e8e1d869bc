"""suntimes public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    sun_times,
    sun_time,
    solar_noon,
    sun_elevation,
    list_engines,
    engine_info,
    get_engine,
    register_engine,
)
from .core.angle import Angle
from .core.errors import SuntimesError, InvalidEventError, DependencyUnavailableError
from .core.julian import JulianCentury, JulianDay
from .core.types import SunEvent, SunTimes

__all__ = [
    "sun_times",
    "sun_time",
    "solar_noon",
    "sun_elevation",
    "list_engines",
    "engine_info",
    "get_engine",
    "register_engine",
    "Angle",
    "JulianDay",
    "JulianCentury",
    "SunEvent",
    "SunTimes",
    "SuntimesError",
    "InvalidEventError",
    "DependencyUnavailableError",
]
