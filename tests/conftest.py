"""
Shared fixtures: test settings, an in-memory site API and a client app
"""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("ADMIN_EMAILS", "admin@highfive.dev,ops@highfive.dev")
os.environ.setdefault("SUPABASE_URL", "https://project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "service-role-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("GEMINI_API_KEY", "")

import itertools
import json
from typing import Dict, List, Optional, Set, Tuple

import httpx
import pytest

from highfive.client.app import ClientApp

ADMIN_EMAIL = "admin@highfive.dev"
API_BASE = "http://testserver"


class FakeSiteApi:
    """
    In-memory stand-in for the site API

    Collections are keyed by list path. ``fail`` maps (method, path) to a
    status code returned instead of handling the request; ``garbled`` holds
    (method, path) pairs answered with 200 and an HTML body.
    """

    def __init__(self):
        self.collections: Dict[str, List[dict]] = {
            "/api/activity": [],
            "/api/team": [],
            "/api/services": [],
            "/api/projects": [],
            "/api/admin/events": [],
            "/api/events": [],
            "/api/network/partners": [],
            "/api/network/collaborations": [],
            "/api/applications": [],
            "/api/admin/feedback": [],
            "/api/feedback": [],
            "/api/admin/packages": [],
            "/api/packages": [],
        }
        self.fail: Dict[Tuple[str, str], int] = {}
        self.garbled: Set[Tuple[str, str]] = set()
        self.requests: List[httpx.Request] = []
        self.valid_token = "good-token"
        self.chat_reply: Optional[str] = "We build websites and logos."
        self._ids = itertools.count(1)

    def calls(self, method: str, path: Optional[str] = None) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and (path is None or r.url.path == path)
        ]

    def _split(self, path: str):
        for base in sorted(self.collections, key=len, reverse=True):
            if path == base:
                return base, None
            if path.startswith(base + "/"):
                return base, path[len(base) + 1:]
        return None, None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method, path = request.method, request.url.path

        if (method, path) in self.fail:
            code = self.fail[(method, path)]
            return httpx.Response(code, json={"detail": f"Server said {code}"})

        if (method, path) in self.garbled:
            return httpx.Response(200, text="<html>Gateway page</html>", headers={"Content-Type": "text/html"})

        if path == "/auth/login":
            body = json.loads(request.content)
            if body.get("password") != "correct-password":
                return httpx.Response(401, json={"detail": "Invalid login credentials"})
            return httpx.Response(200, json={
                "status": "success",
                "message": "Login successful",
                "access_token": self.valid_token,
                "email": body["email"],
            })

        if path == "/auth/logout":
            return httpx.Response(200, json={"status": "success"})

        if path == "/auth/me":
            if request.headers.get("Authorization") != f"Bearer {self.valid_token}":
                return httpx.Response(401, json={"detail": "Could not validate credentials"})
            return httpx.Response(200, json={"email": ADMIN_EMAIL, "user_id": "u1", "is_admin": True})

        if path == "/api/chat":
            if self.chat_reply is None:
                return httpx.Response(500, text="Internal Server Error")
            return httpx.Response(200, json={"reply": self.chat_reply, "fallback": False})

        base, row_id = self._split(path)
        if base is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        rows = self.collections[base]

        if method == "GET" and row_id is None:
            return httpx.Response(200, json=list(reversed(rows)))

        if method == "POST" and row_id is None:
            row = dict(json.loads(request.content))
            row["id"] = f"id-{next(self._ids)}"
            rows.append(row)
            return httpx.Response(201, json=row)

        row = next((r for r in rows if r["id"] == row_id), None)
        if row is None:
            return httpx.Response(404, json={"detail": "Not found"})

        if method == "PUT":
            row.update(json.loads(request.content))
            return httpx.Response(200, json=row)

        if method == "DELETE":
            rows.remove(row)
            return httpx.Response(204)

        return httpx.Response(405, json={"detail": "Method Not Allowed"})


@pytest.fixture
def site_api():
    return FakeSiteApi()


@pytest.fixture
def make_app(site_api):
    """Factory so each test builds the app inside its own event loop"""
    def factory(**kwargs):
        kwargs.setdefault("admin_emails", [ADMIN_EMAIL])
        return ClientApp(base_url=API_BASE, transport=httpx.MockTransport(site_api.handler), **kwargs)
    return factory
