"""
Client Auth
Session context, route guard and navigator for the admin panel
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional
from highfive.config import settings
from highfive.client.api import ApiClient, describe_failure
from highfive.client.errors import HighFiveError

logger = logging.getLogger(__name__)

ACCESS_DENIED = "Access denied. Only authorized administrators can log in."


@dataclass
class LoginResult:
    success: bool
    error: Optional[str] = None


class AuthContext:
    """
    Session state shared by the guard and the admin views.

    ``loading`` stays True until the first settle (restore, login or
    expiry). A 401 from any API call expires the session.
    """

    def __init__(self, api: ApiClient, admin_emails: Optional[Iterable[str]] = None):
        self.api = api
        self.api.on_unauthorized = self.expire
        if admin_emails is None:
            admin_emails = settings.admin_emails
        self.admin_emails = [e.strip().lower() for e in admin_emails if e.strip()]
        self.loading = True
        self.user: Optional[dict] = None
        self._listeners: List[Callable[["AuthContext"], None]] = []

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def email(self) -> Optional[str]:
        return self.user.get("email") if self.user else None

    def is_allowed(self, email: str) -> bool:
        return bool(email) and email.strip().lower() in self.admin_emails

    def subscribe(self, listener: Callable[["AuthContext"], None]) -> Callable[[], None]:
        """Register a listener; returns a function that removes it"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _settle(self, user: Optional[dict]) -> None:
        self.user = user
        self.loading = False
        for listener in list(self._listeners):
            listener(self)

    async def restore(self, token: Optional[str] = None) -> None:
        """Settle the initial session from a stored access token"""

        if token:
            self.api.token = token

        if not self.api.token:
            self._settle(None)
            return

        try:
            user = await self.api.request("/auth/me")
        except HighFiveError as e:
            logger.info("Stored session rejected: %s", describe_failure(e))
            self.api.token = None
            self._settle(None)
            return

        if not user or not self.is_allowed(user.get("email", "")):
            self.api.token = None
            self._settle(None)
            return

        self._settle(user)

    async def login(self, email: str, password: str) -> LoginResult:
        """Sign in; emails outside the allowlist are refused without a request"""

        if not self.is_allowed(email):
            return LoginResult(success=False, error=ACCESS_DENIED)

        try:
            session = await self.api.request(
                "/auth/login", "POST", {"email": email.strip(), "password": password}
            )
        except HighFiveError as e:
            if self.loading:
                self._settle(None)
            return LoginResult(success=False, error=describe_failure(e))

        self.api.token = session["access_token"]
        self._settle({"email": session.get("email", email.strip())})
        return LoginResult(success=True)

    async def logout(self) -> None:
        if self.api.token:
            try:
                await self.api.request("/auth/logout", "POST")
            except HighFiveError as e:
                logger.warning("Logout request failed: %s", describe_failure(e))
        self.api.token = None
        self._settle(None)

    def expire(self) -> None:
        """Drop the session after the server rejected it"""
        self.api.token = None
        if self.user is not None or self.loading:
            self._settle(None)


class GuardAction(str, Enum):
    PLACEHOLDER = "placeholder"
    REDIRECT = "redirect"
    RENDER = "render"


@dataclass(frozen=True)
class GuardDecision:
    action: GuardAction
    location: Optional[str] = None


class AuthGuard:
    """Gate admin paths on the session"""

    def __init__(self, context: AuthContext, admin_prefix: str = "/admin", login_path: str = "/admin/login"):
        self.context = context
        self.admin_prefix = admin_prefix.rstrip("/")
        self.login_path = login_path

    def is_protected(self, path: str) -> bool:
        path = path.split("?", 1)[0].rstrip("/") or "/"
        if path == self.login_path:
            return False
        return path == self.admin_prefix or path.startswith(self.admin_prefix + "/")

    def evaluate(self, path: str) -> GuardDecision:
        if self.context.loading:
            return GuardDecision(GuardAction.PLACEHOLDER)
        if not self.context.is_authenticated and self.is_protected(path):
            return GuardDecision(GuardAction.REDIRECT, self.login_path)
        return GuardDecision(GuardAction.RENDER, path)


class Navigator:
    """
    Current location plus guard re-evaluation.

    The guard runs on every navigate() and every auth-state change, so an
    expired session on an admin page lands on the login page.
    """

    def __init__(self, guard: AuthGuard, path: str = "/"):
        self.guard = guard
        self.path = path
        self.history: List[str] = []
        self.decision = GuardDecision(GuardAction.PLACEHOLDER)
        self._listeners: List[Callable[[GuardDecision], None]] = []
        self._unsubscribe = guard.context.subscribe(lambda _context: self._evaluate())

    def on_change(self, listener: Callable[[GuardDecision], None]) -> None:
        self._listeners.append(listener)

    def navigate(self, path: str) -> GuardDecision:
        self.path = path
        return self._evaluate()

    def _evaluate(self) -> GuardDecision:
        decision = self.guard.evaluate(self.path)
        if decision.action is GuardAction.REDIRECT:
            self.path = decision.location
        if decision.action is not GuardAction.PLACEHOLDER:
            if not self.history or self.history[-1] != self.path:
                self.history.append(self.path)
        self.decision = decision
        for listener in list(self._listeners):
            listener(decision)
        return decision

    def close(self) -> None:
        self._unsubscribe()
