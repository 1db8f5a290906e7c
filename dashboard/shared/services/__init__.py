"""Service layer: fleet analytics for the dashboard."""

from .fleet_metrics import FleetMetricsService

__all__ = ["FleetMetricsService"]
