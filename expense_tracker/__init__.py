"""Multi-tenant personal expense tracker."""

__version__ = "0.1.0"
