"""
suntimes.engines.events
-----------------------
Maps each elevation-based event to the angle the solvers are asked to reach.

The solvers work with the sun's distance from the zenith, signed by the side
of the meridian: dawn events get a negative angle (-90 deg + threshold),
dusk events a positive one (90 deg - threshold). The hour angle formula only
sees the cosine, and the sign alone decides on which side of noon the
result lands.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.angle import Angle
from ..core.errors import InvalidEventError
from ..core.types import SunEvent


# Elevation of the sun's centre above the horizon, degrees.
ASTRO_TWILIGHT_ELEV = -18.0
NAUT_TWILIGHT_ELEV = -12.0
CIVIL_TWILIGHT_ELEV = -6.0
DAYTIME_ELEV = -0.833  # upper limb on the horizon, with standard refraction


def _dawn(threshold_deg: float) -> Angle:
    return Angle.from_deg(-90.0 + threshold_deg)


def _dusk(threshold_deg: float) -> Angle:
    return Angle.from_deg(90.0 - threshold_deg)


EVENT_ANGLES: Mapping[SunEvent, Angle] = MappingProxyType({
    SunEvent.ASTRO_DAWN: _dawn(ASTRO_TWILIGHT_ELEV),
    SunEvent.NAUT_DAWN: _dawn(NAUT_TWILIGHT_ELEV),
    SunEvent.CIVIL_DAWN: _dawn(CIVIL_TWILIGHT_ELEV),
    SunEvent.SUNRISE: _dawn(DAYTIME_ELEV),
    SunEvent.SUNSET: _dusk(DAYTIME_ELEV),
    SunEvent.CIVIL_DUSK: _dusk(CIVIL_TWILIGHT_ELEV),
    SunEvent.NAUT_DUSK: _dusk(NAUT_TWILIGHT_ELEV),
    SunEvent.ASTRO_DUSK: _dusk(ASTRO_TWILIGHT_ELEV),
})


def event_angle(event: SunEvent) -> Angle:
    """Signed zenith angle for an elevation event; noon and midnight have none."""
    try:
        return EVENT_ANGLES[SunEvent(event)]
    except KeyError:
        raise InvalidEventError(f"{SunEvent(event).value} is not an elevation event") from None


ELEVATION_EVENTS = tuple(EVENT_ANGLES)
