"""Telemetry and observability helpers.

This package emits deterministic command events for CLI auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
