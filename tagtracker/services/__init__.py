"""Dashboard services."""
from .dashboard_service import DashboardService, DashboardError
from . import presentation_service

__all__ = ['DashboardService', 'DashboardError', 'presentation_service']
