"""
Infrastructure layer - Backend API clients.
"""

from .fake_api_client import DEFAULT_USER_RECORDS, FakeApiService, IUserAPIClient

__all__ = ["DEFAULT_USER_RECORDS", "FakeApiService", "IUserAPIClient"]
