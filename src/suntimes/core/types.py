from __future__ import annotations
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, Literal, Optional, Tuple

@dataclass(frozen=True)
class EngineId:
    family: Literal["noaa", "wiki", "custom"]
    name: str
    version: str

class SunEvent(str, Enum):
    """The ten daily solar events, in chronological order from dawn."""
    ASTRO_DAWN = "astro_dawn"
    NAUT_DAWN = "naut_dawn"
    CIVIL_DAWN = "civil_dawn"
    SUNRISE = "sunrise"
    NOON = "noon"
    SUNSET = "sunset"
    CIVIL_DUSK = "civil_dusk"
    NAUT_DUSK = "naut_dusk"
    ASTRO_DUSK = "astro_dusk"
    MIDNIGHT = "midnight"

    @property
    def is_transit(self) -> bool:
        return self in (SunEvent.NOON, SunEvent.MIDNIGHT)

@dataclass(frozen=True)
class SunTimes:
    """
    UTC instants of the solar events of one day.

    Noon and midnight always exist; every other field is None when the sun
    never reaches the event's elevation on that day (polar day or night).
    """
    noon: datetime
    midnight: datetime
    astro_dawn: Optional[datetime] = None
    naut_dawn: Optional[datetime] = None
    civil_dawn: Optional[datetime] = None
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    civil_dusk: Optional[datetime] = None
    naut_dusk: Optional[datetime] = None
    astro_dusk: Optional[datetime] = None

    def get(self, event: SunEvent) -> Optional[datetime]:
        return getattr(self, SunEvent(event).value)

    def items(self) -> Iterator[Tuple[SunEvent, Optional[datetime]]]:
        for ev in SunEvent:
            yield ev, self.get(ev)

    def as_dict(self) -> Dict[str, Optional[datetime]]:
        return asdict(self)
