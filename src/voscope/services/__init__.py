"""Navigation services: context transitions, breadcrumbs and the controller."""

from .breadcrumb import BreadcrumbSegment, activate_segment, build_breadcrumb
from .hierarchy_controller import VOHierarchyController
from .navigator import initial_context, navigate

__all__ = [
    "BreadcrumbSegment",
    "VOHierarchyController",
    "activate_segment",
    "build_breadcrumb",
    "initial_context",
    "navigate",
]
