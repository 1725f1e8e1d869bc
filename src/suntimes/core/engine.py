from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Protocol

from .angle import Angle
from .types import SunEvent, SunTimes

class SunEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def sun_time(self, latitude: Angle, longitude: Angle, d: date, event: SunEvent) -> Optional[datetime]: ...
    def sun_times(self, latitude: Angle, longitude: Angle, d: date) -> SunTimes: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, SunEngine]

    def get(self, name: str) -> SunEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: SunEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
