"""Runtime services (logging, profiling) shared by the editor core."""

from . import telemetry

__all__ = ["telemetry"]
