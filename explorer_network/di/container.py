"""Minimal dependency injection container for the network layer.

Goals:
- Centralize construction of the shared fetch executor and API services.
- Own one HTTP client pool so consumers of a container share clients, while
  separate containers (different transports, debug settings) never do.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Dict, Optional

import httpx

from ..base.http import AsyncClientPool
from ..config import get_network_config
from ..network import MainApiService, NetworkWrapper, SearchApiService


class NetworkContainer:
    """Caches singletons built from one merged configuration.

    Args:
        config: Merged configuration (see :func:`get_network_config`).
        transport: Optional httpx transport for every client (tests use
            ``httpx.MockTransport``).

    Services resolve their client from the container's pool on each request,
    so one container can serve several event loops (e.g. successive
    ``asyncio.run`` calls).
    """

    def __init__(
        self,
        config: Dict[str, Any] | None = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config if config is not None else get_network_config()
        self._pool = AsyncClientPool(debug=bool(self._config.get("debug")), transport=transport)
        self._singletons: Dict[str, Any] = {}

    @property
    def config(self) -> Dict[str, Any]:
        return dict(self._config)

    @property
    def pool(self) -> AsyncClientPool:
        return self._pool

    def network_wrapper(self) -> NetworkWrapper:
        if "network_wrapper" not in self._singletons:
            self._singletons["network_wrapper"] = NetworkWrapper()
        return self._singletons["network_wrapper"]

    def main_api(self) -> MainApiService:
        if "main_api" not in self._singletons:
            source = partial(self._pool.get, self._config["main_base_url"] or None, "main")
            self._singletons["main_api"] = MainApiService(source)
        return self._singletons["main_api"]

    def search_api(self) -> SearchApiService:
        if "search_api" not in self._singletons:
            source = partial(self._pool.get, self._config["search_base_url"] or None, "search")
            self._singletons["search_api"] = SearchApiService(source, path=self._config["search_path"])
        return self._singletons["search_api"]

    def clear(self) -> None:  # testing convenience
        self._singletons.clear()

    async def aclose(self) -> None:
        """Close this container's clients on the running loop and drop singletons."""
        self.clear()
        await self._pool.aclose()


def build_container(
    overrides: Dict[str, Any] | None = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NetworkContainer:
    """Merge configuration with ``overrides`` and return a new container."""
    return NetworkContainer(get_network_config(overrides), transport=transport)


__all__ = ["NetworkContainer", "build_container"]
