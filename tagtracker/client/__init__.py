"""HTTP client for the event API."""
from .api_client import ApiClient, ApiError

__all__ = ['ApiClient', 'ApiError']
