"""Ephemeris adapters/providers (optional).

This package provides thin wrappers around external ephemeris libraries,
used only to validate the analytical engines.
Install with:
  pip install "suntimes[ephemeris]"
"""

from ..core.errors import DependencyUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise DependencyUnavailableError('Ephemeris support requires: pip install "suntimes[ephemeris]"') from e
