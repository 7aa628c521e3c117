"""Telemetry sinks for planet events."""

from .logging import FanoutTelemetry, JsonlTelemetry, LoggingTelemetry, Telemetry

__all__ = ["FanoutTelemetry", "JsonlTelemetry", "LoggingTelemetry", "Telemetry"]
