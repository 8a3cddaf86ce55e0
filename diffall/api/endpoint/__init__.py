"""Endpoint API module: turning revision tokens into a comparison plan."""

from .ComparisonPlan import ComparisonPlan, CompareMode
from .Endpoint import Endpoint, EndpointKind
from .resolve_endpoints import resolve_endpoints
from .RevisionResolutionError import RevisionResolutionError
from .UsageError import UsageError

__all__ = [
    "CompareMode",
    "ComparisonPlan",
    "Endpoint",
    "EndpointKind",
    "RevisionResolutionError",
    "UsageError",
    "resolve_endpoints",
]
