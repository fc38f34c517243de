"""Application services."""

from greenpath.services.package_presenter import present_package, render_package
from greenpath.services.trip_service import TripSession

__all__ = ["TripSession", "present_package", "render_package"]
