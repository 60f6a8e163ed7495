"""HTTP utilities package.

Exposes the per-owner pool of httpx async clients.
"""

from .client import AsyncClientPool

__all__ = ["AsyncClientPool"]
