"""DI container for the network layer.

No external library dependency. Acts as the composition root handing out the
fetch executor and the API services.
"""
from __future__ import annotations

from .container import NetworkContainer, build_container

__all__ = ["NetworkContainer", "build_container"]
