"""
Client App
Explicit context wiring the API client, cache, mutations and auth
"""

import logging
from typing import Iterable, Optional
import httpx
from highfive.client.api import ApiClient
from highfive.client.auth import AuthContext, AuthGuard, Navigator
from highfive.client.mutations import MutationExecutor
from highfive.client.query_cache import QueryCache
from highfive.client.views.admin import ADMIN_SCREENS
from highfive.client.views.base import CollectionScreen

logger = logging.getLogger(__name__)


class ClientApp:
    """
    One client session.

    Built once per process and passed to every view; nothing reads
    module-level state. Logging out (or a 401) clears the query cache.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        admin_emails: Optional[Iterable[str]] = None
    ):
        self.api = ApiClient(base_url, transport=transport)
        self.cache = QueryCache()
        self.mutations = MutationExecutor(self.cache)
        self.auth = AuthContext(self.api, admin_emails)
        self.guard = AuthGuard(self.auth)
        self.navigator = Navigator(self.guard)
        self._was_authenticated = False
        self.auth.subscribe(self._on_auth_change)

    def _on_auth_change(self, context: AuthContext) -> None:
        if self._was_authenticated and not context.is_authenticated:
            logger.info("Session ended, clearing cached queries")
            self.cache.clear()
        self._was_authenticated = context.is_authenticated

    async def start(self, token: Optional[str] = None) -> None:
        """Settle the initial session"""
        await self.auth.restore(token)

    def screen(self, name: str) -> CollectionScreen:
        """Build an admin screen by section name"""
        try:
            screen_cls = ADMIN_SCREENS[name]
        except KeyError:
            raise ValueError(f"Unknown admin section: {name}")
        return screen_cls(self)

    async def aclose(self) -> None:
        self.navigator.close()
        await self.api.aclose()

    async def __aenter__(self) -> "ClientApp":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
