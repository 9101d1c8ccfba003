"""
HTTP adapters for paybind.
"""

from .adapter import HTTPAdapter
from .requests_adapter import RequestsAdapter

__all__ = ["HTTPAdapter", "RequestsAdapter"]
