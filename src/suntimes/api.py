from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from .core.angle import Angle
from .core.engine import EngineRegistry, SunEngine
from .core.errors import SuntimesError
from .core.julian import JulianCentury, JulianDay, J2000, utc_midnight
from .core.types import SunEvent, SunTimes
from .reference.solar import equation_of_time, solar_zenith_angle

LOG = logging.getLogger(__name__)

DEFAULT_ENGINE = "noaa"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _utc_date(d: date) -> date:
    """Aware datetimes count by their UTC date; naive ones by their own."""
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone(timezone.utc)
        return d.date()
    return d

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str = DEFAULT_ENGINE) -> SunEngine:
    return _reg().get(engine)

def register_engine(name: str, engine: SunEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)
    LOG.debug("registered engine %r", name)

def sun_times(
    latitude: float,
    longitude: float,
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
) -> SunTimes:
    """
    All ten solar events of the UTC date `d` at (latitude, longitude), degrees
    north and east. Events that do not happen on that day are None.
    """
    d = _utc_date(d)
    return _reg().get(engine).sun_times(Angle.from_deg(latitude), Angle.from_deg(longitude), d)

def sun_time(
    latitude: float,
    longitude: float,
    d: date,
    event: SunEvent,
    *,
    engine: str = DEFAULT_ENGINE,
) -> Optional[datetime]:
    d = _utc_date(d)
    return _reg().get(engine).sun_time(Angle.from_deg(latitude), Angle.from_deg(longitude), d, SunEvent(event))

def solar_noon(latitude: float, longitude: float, d: date, *, engine: str = DEFAULT_ENGINE) -> datetime:
    t = sun_time(latitude, longitude, d, SunEvent.NOON, engine=engine)
    if t is None:
        raise SuntimesError(f"engine {engine!r} returned no noon for {d}")
    return t

# ============================================================
# Sun position at an instant
# ============================================================

def sun_elevation(latitude: float, longitude: float, when: datetime) -> float:
    """
    Elevation of the sun's centre above the horizon in degrees (no
    refraction) at the aware datetime `when`.
    """
    if when.tzinfo is None:
        raise ValueError("when must be timezone-aware")
    when = when.astimezone(timezone.utc)
    lat = Angle.from_deg(latitude)
    lon = Angle.from_deg(longitude)

    tp = JulianCentury.from_day(JulianDay.from_datetime(when)) - J2000
    since_midnight = JulianDay((when - utc_midnight(when.date())).total_seconds() / 86400.0)
    # one full turn per day
    rotation = Angle.from_deg(since_midnight.value * 360.0)
    ha = lon + equation_of_time(tp) + rotation - Angle.from_deg(180.0)

    return 90.0 - solar_zenith_angle(tp, lat, ha).deg()
