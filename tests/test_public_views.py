import asyncio
from datetime import date

import pytest

from highfive.client.errors import ValidationFailure
from highfive.client.icons import DEFAULT_ICON, activity_icon, service_icon
from highfive.client.views.public import (
    ActivityFeed,
    ChatSession,
    EventsView,
    FeedbackForm,
    FeedbackView,
    FormState,
    ServicesView,
    StatsCounter,
    ApplyForm,
    years_of_innovation,
)


async def loaded(app, view):
    view.load()
    for key, path in view.sources.values():
        await app.cache.fetch(key, view._fetcher(path))
    return view


def test_services_fall_back_to_builtin_list_on_server_error(site_api, make_app):
    site_api.fail[("GET", "/api/services")] = 500

    async def scenario():
        app = make_app()
        view = await loaded(app, ServicesView(app))
        await app.aclose()
        return view

    view = asyncio.run(scenario())

    assert view.is_fallback
    assert [s["title"] for s in view.services] == ["Web Development", "Logo Design"]
    assert len(view.services[0]["features"]) == 4


def test_services_hide_inactive_entries(site_api, make_app):
    site_api.collections["/api/services"].extend([
        {"id": "s1", "title": "Web Development", "icon": "code", "is_active": True},
        {"id": "s2", "title": "Retired", "icon": "shield", "is_active": False},
    ])

    async def scenario():
        app = make_app()
        view = await loaded(app, ServicesView(app))
        await app.aclose()
        return view

    view = asyncio.run(scenario())

    assert not view.is_fallback
    assert [s["title"] for s in view.services] == ["Web Development"]
    assert view.icon_for(view.services[0]).glyph == "code"


def test_stats_counter(site_api, make_app):
    site_api.collections["/api/projects"].extend([
        {"id": "p1", "title": "A", "status": "active"},
        {"id": "p2", "title": "B", "status": "completed"},
        {"id": "p3", "title": "C", "status": "in-progress"},
    ])
    site_api.collections["/api/team"].extend([{"id": "m1"}, {"id": "m2"}])

    async def scenario():
        app = make_app()
        view = await loaded(app, StatsCounter(app, today=date(2026, 10, 19)))
        await app.aclose()
        return view

    view = asyncio.run(scenario())

    assert view.ongoing_projects == 2
    assert view.team_size == 2
    assert view.years == 2
    assert view.stats()[-1]["value"] == "Mon–Fri, 9:00–18:00 IST"


@pytest.mark.parametrize("today, expected", [
    (date(2025, 10, 1), 1),
    (date(2026, 9, 30), 1),
    (date(2026, 10, 1), 2),
    (date(2028, 1, 15), 3),
])
def test_years_of_innovation(today, expected):
    assert years_of_innovation(today) == expected


def test_events_split_and_filter(site_api, make_app):
    site_api.collections["/api/events"].extend([
        {"id": "e1", "title": "Hackathon", "event_date": "2026-11-02", "status": "upcoming",
         "category": "Competition", "location": "Chennai"},
        {"id": "e2", "title": "Design Meetup", "event_date": "2026-09-01", "status": "completed",
         "category": "Meetup", "location": "Online", "featured": True},
        {"id": "e3", "title": "AI Workshop", "event_date": "2026-10-19", "status": "ongoing",
         "category": "Workshop", "description": "Hands-on Gemini"},
    ])

    async def scenario():
        app = make_app()
        view = await loaded(app, EventsView(app, today=date(2026, 10, 19)))
        await app.aclose()
        return view

    view = asyncio.run(scenario())

    assert {e["id"] for e in view.upcoming} == {"e1", "e3"}
    assert [e["id"] for e in view.past] == ["e2"]
    assert [e["id"] for e in view.featured] == ["e2"]
    assert [e["id"] for e in view.filter(search="gemini")] == ["e3"]
    assert [e["id"] for e in view.filter(category="Meetup")] == ["e2"]
    assert set(view.categories) == {"Competition", "Meetup", "Workshop"}


def test_activity_feed_attaches_icons(site_api, make_app):
    site_api.collections["/api/activity"].extend([
        {"id": "a1", "type": "member", "title": "Welcome Ada"},
        {"id": "a2", "type": "unknown", "title": "Mystery"},
    ])

    async def scenario():
        app = make_app()
        view = await loaded(app, ActivityFeed(app))
        await app.aclose()
        return view.entries

    entries = asyncio.run(scenario())
    icons = {e["id"]: e["icon"] for e in entries}

    assert icons["a1"].glyph == "users"
    assert icons["a2"] == DEFAULT_ICON


def test_icon_lookups_are_closed():
    assert activity_icon("project").glyph == "briefcase"
    assert activity_icon("ANNOUNCEMENT").color == "orange"
    assert activity_icon(None) == DEFAULT_ICON
    assert service_icon("palette").glyph == "palette"
    assert service_icon("https://cdn.example.com/logo.svg") == DEFAULT_ICON


def test_feedback_view_average(site_api, make_app):
    site_api.collections["/api/feedback"].extend([
        {"id": "f1", "rating": 5, "message": "Great", "is_approved": True},
        {"id": "f2", "rating": 4, "message": "Good", "is_approved": True},
    ])

    async def scenario():
        app = make_app()
        view = await loaded(app, FeedbackView(app))
        await app.aclose()
        return view

    view = asyncio.run(scenario())

    assert len(view.entries) == 2
    assert view.average_rating == 4.5


def test_feedback_form_sends_anonymous_for_blank_name(site_api, make_app):
    async def scenario():
        app = make_app()
        form = FeedbackForm(app)
        form.set_field("rating", 4)
        form.set_field("message", "Loved the new site")
        result = await form.submit()
        await app.aclose()
        return form, result

    form, result = asyncio.run(scenario())

    assert result.ok
    assert form.state is FormState.SUBMITTED
    assert site_api.collections["/api/feedback"][0]["name"] == "Anonymous"
    assert form.values["message"] == ""


def test_feedback_form_requires_rating_in_range(make_app, site_api):
    async def scenario():
        app = make_app()
        form = FeedbackForm(app)
        form.set_field("rating", 0)
        form.set_field("message", "Hi")
        can_submit = form.can_submit
        with pytest.raises(ValidationFailure) as info:
            await form.submit()
        await app.aclose()
        return can_submit, info.value

    can_submit, error = asyncio.run(scenario())

    assert can_submit is False
    assert error.fields == ["rating"]
    assert site_api.calls("POST") == []


def test_apply_form_failure_keeps_values(site_api, make_app):
    site_api.fail[("POST", "/api/applications")] = 500

    async def scenario():
        app = make_app()
        form = ApplyForm(app)
        form.set_field("name", "Ada")
        form.set_field("email", "ada@example.com")
        result = await form.submit()
        await app.aclose()
        return form, result

    form, result = asyncio.run(scenario())

    assert not result.ok
    assert form.state is FormState.FAILED
    assert form.error == "Server said 500"
    assert form.values["name"] == "Ada"


def test_chat_reply_and_fallback(site_api, make_app):
    async def scenario():
        app = make_app()
        chat = ChatSession(app, team_email="team@highfive.dev")
        first = await chat.send("What do you build?")
        site_api.chat_reply = None
        second = await chat.send("And logos?")
        await app.aclose()
        return chat, first, second

    chat, first, second = asyncio.run(scenario())

    assert first == "We build websites and logos."
    assert "team@highfive.dev" in second
    assert [m["role"] for m in chat.messages] == ["assistant", "user", "assistant", "user", "assistant"]
