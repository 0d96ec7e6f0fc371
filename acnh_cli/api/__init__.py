"""
ACNH API Layer.

This package handles all HTTP communication with the ACNH API.
"""

from . import endpoints
from .client import AcnhAPIClient

__all__ = ["AcnhAPIClient", "endpoints"]
