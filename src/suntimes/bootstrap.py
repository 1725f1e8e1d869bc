from __future__ import annotations
import logging

from suntimes.core.engine import EngineRegistry, SunEngine
from suntimes.engines.noaa import NoaaEngine
from suntimes.engines.wiki import WikiEngine

LOG = logging.getLogger(__name__)

def standard_engines() -> dict[str, SunEngine]:
    return {"noaa": NoaaEngine(), "wiki": WikiEngine()}

def build_registry() -> EngineRegistry:
    engines = standard_engines()
    LOG.debug("registering engines: %s", sorted(engines))
    return EngineRegistry(engines)
