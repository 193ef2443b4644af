import asyncio

from highfive.client.auth import GuardAction
from highfive.client.views.admin import ApplicationsScreen
from highfive.client.views.base import ScreenState


def test_guard_shows_placeholder_while_loading(make_app):
    async def scenario():
        app = make_app()
        decision = app.navigator.navigate("/admin/team")
        path = app.navigator.path
        await app.aclose()
        return decision, path

    decision, path = asyncio.run(scenario())

    assert decision.action is GuardAction.PLACEHOLDER
    assert path == "/admin/team"


def test_unauthenticated_admin_navigation_redirects_to_login(make_app):
    async def scenario():
        app = make_app()
        await app.start()
        decisions = [app.navigator.navigate(p) for p in ("/admin", "/admin/projects", "/admin/login", "/services")]
        await app.aclose()
        return decisions

    admin, nested, login, public = asyncio.run(scenario())

    assert admin.action is GuardAction.REDIRECT
    assert admin.location == "/admin/login"
    assert nested.location == "/admin/login"
    assert login.action is GuardAction.RENDER
    assert public.action is GuardAction.RENDER
    assert public.location == "/services"


def test_pending_navigation_resolves_when_session_settles(site_api, make_app):
    async def scenario():
        app = make_app()
        decisions = []
        app.navigator.on_change(decisions.append)
        app.navigator.navigate("/admin/events")
        await app.start()
        await app.aclose()
        return decisions, app.navigator.path

    decisions, path = asyncio.run(scenario())

    assert [d.action for d in decisions] == [GuardAction.PLACEHOLDER, GuardAction.REDIRECT]
    assert path == "/admin/login"


def test_login_outside_allowlist_makes_no_request(site_api, make_app):
    async def scenario():
        app = make_app()
        result = await app.auth.login("stranger@example.com", "correct-password")
        await app.aclose()
        return result, app.auth.is_authenticated

    result, authenticated = asyncio.run(scenario())

    assert not result.success
    assert "Access denied" in result.error
    assert not authenticated
    assert site_api.requests == []


def test_login_then_admin_pages_render(site_api, make_app):
    async def scenario():
        app = make_app()
        await app.start()
        bad = await app.auth.login("admin@highfive.dev", "wrong")
        good = await app.auth.login("Admin@HighFive.dev", "correct-password")
        decision = app.navigator.navigate("/admin/team")
        token = app.api.token
        await app.aclose()
        return bad, good, decision, token

    bad, good, decision, token = asyncio.run(scenario())

    assert not bad.success
    assert bad.error == "Invalid login credentials"
    assert good.success
    assert token == "good-token"
    assert decision.action is GuardAction.RENDER


def test_restore_uses_stored_token(site_api, make_app):
    async def scenario():
        app = make_app()
        await app.start("good-token")
        ok = (app.auth.is_authenticated, app.auth.email)
        other = make_app()
        await other.start("expired-token")
        rejected = (other.auth.is_authenticated, other.auth.loading, other.api.token)
        await app.aclose()
        await other.aclose()
        return ok, rejected

    ok, rejected = asyncio.run(scenario())

    assert ok == (True, "admin@highfive.dev")
    assert rejected == (False, False, None)


def test_expired_session_redirects_and_clears_cache(site_api, make_app):
    site_api.collections["/api/applications"].append({"id": "a1", "name": "Ada", "email": "ada@x.dev"})

    async def scenario():
        app = make_app()
        await app.start("good-token")
        app.navigator.navigate("/admin/applications")
        screen = ApplicationsScreen(app)
        screen.load()
        await app.cache.fetch(screen.key, screen.fetch_rows)
        before = screen.state

        # token revoked server-side; the next request gets a 401
        site_api.valid_token = "rotated"
        site_api.fail[("GET", "/api/applications")] = 401
        await app.cache.invalidate(("applications",))

        result = (before, app.auth.is_authenticated, app.navigator.path, app.cache.keys())
        await app.aclose()
        return result

    before, authenticated, path, keys = asyncio.run(scenario())

    assert before is ScreenState.LOADED
    assert not authenticated
    assert path == "/admin/login"
    assert keys == []


def test_logout_clears_session_and_cache(site_api, make_app):
    async def scenario():
        app = make_app()
        await app.auth.login("admin@highfive.dev", "correct-password")
        await app.cache.fetch(("team",), lambda: app.api.request("/api/team"))
        await app.auth.logout()
        await app.aclose()
        return app

    app = asyncio.run(scenario())

    assert not app.auth.is_authenticated
    assert app.api.token is None
    assert app.cache.keys() == []
    assert len(site_api.calls("POST", "/auth/logout")) == 1
