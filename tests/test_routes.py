import asyncio
from uuid import uuid4

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from highfive.auth import create_access_token
from highfive.main import app
from highfive.routes import public
from highfive.schemas.submission import CreateApplicationRequest
from highfive.services.auth_service import auth_service
from highfive.services.chat_service import chat_service
from highfive.services.package_service import package_service
from highfive.services.project_service import project_service
from highfive.services.email_service import email_service
from highfive.services.submission_service import application_service, feedback_service
from highfive.services.team_service import team_service

# Not used as a context manager, so startup never connects the database
client = TestClient(app)


def bearer(email):
    return {"Authorization": f"Bearer {create_access_token(email)}"}


def member_row(**overrides):
    row = {"id": str(uuid4()), "name": "Ravi", "role": "Developer", "display_order": 0, "status": "Active"}
    row.update(overrides)
    return row


def test_health_check():
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_public_team_list(monkeypatch):
    async def fake_list(*args, **kwargs):
        return [member_row(name="Ravi"), member_row(name="Asha", display_order=1)]

    monkeypatch.setattr(team_service, "list_all", fake_list)

    response = client.get("/api/team")

    assert response.status_code == 200
    assert [m["name"] for m in response.json()] == ["Ravi", "Asha"]


def test_admin_write_requires_a_token():
    response = client.post("/api/team", json={"name": "New", "role": "Dev"})

    assert response.status_code in (401, 403)


def test_admin_write_rejects_non_admin_email():
    response = client.post("/api/team", json={"name": "New", "role": "Dev"}, headers=bearer("visitor@gmail.com"))

    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized. Admin access required."


def test_admin_write_rejects_bad_token():
    response = client.post(
        "/api/team", json={"name": "New", "role": "Dev"}, headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401


def test_admin_can_create_and_delete(monkeypatch):
    created = {}
    deleted = []

    async def fake_create(values):
        created.update(values)
        return member_row(name=values["name"], role=values["role"])

    async def fake_delete(member_id):
        deleted.append(member_id)

    monkeypatch.setattr(team_service, "create_member", fake_create)
    monkeypatch.setattr(team_service, "delete", fake_delete)

    response = client.post(
        "/api/team",
        json={"name": " New ", "role": "Dev", "email": ""},
        headers=bearer("Admin@HighFive.dev"),
    )
    member_id = response.json()["id"]
    removed = client.delete(f"/api/team/{member_id}", headers=bearer("admin@highfive.dev"))

    assert response.status_code == 201
    assert created["name"] == "New"
    assert created["email"] is None
    assert created["status"] == "Active"
    assert removed.status_code == 204
    assert str(deleted[0]) == member_id


def test_service_errors_come_back_as_json(monkeypatch):
    async def missing(project_id):
        raise HTTPException(status_code=404, detail="Project not found")

    monkeypatch.setattr(project_service, "get", missing)

    response = client.get(f"/api/projects/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Project not found"}


def test_login_outside_allowlist_never_reaches_supabase(monkeypatch):
    calls = []

    async def fake_sign_in(email, password):
        calls.append(email)
        return {"access_token": "tok"}

    monkeypatch.setattr(auth_service, "sign_in", fake_sign_in)

    response = client.post("/auth/login", json={"email": "stranger@gmail.com", "password": "pw"})

    assert response.status_code == 403
    assert response.json()["detail"].startswith("Access denied")
    assert calls == []


def test_login_and_session_check(monkeypatch):
    async def fake_sign_in(email, password):
        return {"access_token": "supabase-token", "expires_in": 3600, "user": {"email": email}}

    monkeypatch.setattr(auth_service, "sign_in", fake_sign_in)

    login = client.post("/auth/login", json={"email": "ops@highfive.dev", "password": "pw"})
    me = client.get("/auth/me", headers=bearer("ops@highfive.dev"))

    assert login.status_code == 200
    assert login.json()["access_token"] == "supabase-token"
    assert me.json()["email"] == "ops@highfive.dev"
    assert me.json()["is_admin"] is True


def test_public_feedback_submission(monkeypatch):
    received = {}

    async def fake_submit(values):
        received.update(values)
        return {"id": str(uuid4()), "name": "Anonymous", "rating": values["rating"], "message": values["message"]}

    monkeypatch.setattr(feedback_service, "submit", fake_submit)

    response = client.post("/api/feedback", json={"rating": 5, "message": "Great team"})
    invalid = client.post("/api/feedback", json={"rating": 9, "message": "Too good"})

    assert response.status_code == 201
    assert response.json()["name"] == "Anonymous"
    assert received["rating"] == 5
    assert invalid.status_code == 422


def test_chat_route(monkeypatch):
    async def fake_reply(messages):
        return {"reply": f"You said {messages[-1]['content']}", "fallback": False}

    monkeypatch.setattr(chat_service, "reply", fake_reply)

    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})

    assert response.json() == {"reply": "You said hi", "fallback": False}


def test_upload_over_limit_is_rejected():
    big = b"0" * (5 * 1024 * 1024 + 1)

    response = client.post(
        "/api/upload",
        files={"file": ("big.png", big, "image/png")},
        headers=bearer("admin@highfive.dev"),
    )

    assert response.status_code == 400
    assert "big.png" in response.json()["detail"]


@pytest.mark.parametrize("path", ["/", "/services", "/admin/login", "/admin", "/admin/projects"])
def test_pages_render_html(path):
    response = client.get(path)

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


def test_unknown_pages_get_the_not_found_page():
    unknown_section = client.get("/admin/payroll")
    unknown_page = client.get("/nowhere", headers={"Accept": "text/html"})
    unknown_api = client.get("/api/nowhere")

    assert unknown_section.status_code == 404
    assert "text/html" in unknown_section.headers["content-type"]
    assert unknown_page.status_code == 404
    assert unknown_api.json() == {"detail": "Not Found"}


def test_public_packages_list_only_active(monkeypatch):
    seen = {}

    async def fake_list(active_only=False):
        seen["active_only"] = active_only
        return [{"id": str(uuid4()), "name": "Starter", "price": "₹4,999", "features": [{"name": "Hosting", "included": True}]}]

    monkeypatch.setattr(package_service, "list_packages", fake_list)

    response = client.get("/api/packages")

    assert response.status_code == 200
    assert seen["active_only"] is True
    assert response.json()[0]["features"] == [{"name": "Hosting", "included": True}]


def test_admin_package_writes(monkeypatch):
    created = {}

    async def fake_create(values):
        created.update(values)
        return {"id": str(uuid4()), **values}

    monkeypatch.setattr(package_service, "create", fake_create)

    body = {"name": " Growth ", "price": "₹7,499", "description": "", "features": [{"name": "Logo", "included": False}]}
    anonymous = client.post("/api/admin/packages", json=body, headers=bearer("visitor@gmail.com"))
    response = client.post("/api/admin/packages", json=body, headers=bearer("admin@highfive.dev"))
    missing_price = client.post("/api/admin/packages", json={"name": "Bare"}, headers=bearer("admin@highfive.dev"))

    assert anonymous.status_code == 403
    assert response.status_code == 201
    assert created["name"] == "Growth"
    assert created["description"] is None
    assert created["features"] == [{"name": "Logo", "included": False}]
    assert created["is_active"] is True
    assert missing_price.status_code == 422


def test_application_notice_task_is_held_until_done(monkeypatch):
    notified = []

    async def fake_create(values):
        return {"id": str(uuid4()), **values}

    async def fake_notify(application):
        notified.append(application["email"])

    monkeypatch.setattr(application_service, "create", fake_create)
    monkeypatch.setattr(email_service, "notify_new_application", fake_notify)

    async def scenario():
        request = CreateApplicationRequest(name="Ada", email="ada@gmail.com", role="Developer")
        await public.submit_application(request)
        pending = list(public._background_tasks)
        await asyncio.gather(*pending)
        await asyncio.sleep(0)
        return len(pending), len(public._background_tasks)

    pending, remaining = asyncio.run(scenario())

    assert pending == 1
    assert remaining == 0
    assert notified == ["ada@gmail.com"]
