"""
Public Views
Read-only site sections and the public forms
"""

import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING
from highfive.config import settings
from highfive.client.api import describe_failure
from highfive.client.errors import HighFiveError, ValidationFailure
from highfive.client.icons import Icon, activity_icon, service_icon
from highfive.client.mutations import MutationResult
from highfive.client.query_cache import QueryResult, Subscription
from highfive.client.views.base import is_blank

if TYPE_CHECKING:
    from highfive.client.app import ClientApp

logger = logging.getLogger(__name__)

FALLBACK_SERVICES = [
    {
        "id": "fallback-web-development",
        "title": "Web Development",
        "description": "Design and development of all types of websites including static and dynamic sites.",
        "features": [
            "Database-driven websites for better functionality",
            "Responsive, modern, and user-friendly designs",
            "Custom web applications development",
            "Performance optimization and maintenance",
        ],
        "icon": "code",
    },
    {
        "id": "fallback-logo-design",
        "title": "Logo Design",
        "description": "Creation of unique and creative logos that perfectly represent brand identity.",
        "features": [
            "Custom logo designs tailored to vision",
            "Multiple design concepts and revisions",
            "Brand identity development",
            "Full copyright ownership",
        ],
        "icon": "palette",
    },
]

FOUNDED = date(2025, 10, 1)
WORKING_HOURS = "Mon–Fri, 9:00–18:00 IST"


class PublicView:
    """Observer over one or more list queries"""

    sources: Dict[str, Tuple[Tuple[str, ...], str]] = {}

    def __init__(self, app: "ClientApp"):
        self.app = app
        self.results: Dict[str, Optional[QueryResult]] = {name: None for name in self.sources}
        self._subscriptions: List[Subscription] = []
        self._listeners: List[Callable[["PublicView"], None]] = []

    def on_change(self, listener: Callable[["PublicView"], None]) -> None:
        self._listeners.append(listener)

    def load(self) -> None:
        if self._subscriptions:
            return
        for name, (key, path) in self.sources.items():
            self._subscriptions.append(
                self.app.cache.subscribe(key, self._fetcher(path), self._listener_for(name))
            )

    def close(self) -> None:
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions = []

    def _fetcher(self, path: str):
        async def fetch():
            return await self.app.api.request(path) or []
        return fetch

    def _listener_for(self, name: str):
        def listener(result: QueryResult):
            self.results[name] = result
            for callback in list(self._listeners):
                callback(self)
        return listener

    def rows(self, name: str) -> List[dict]:
        result = self.results.get(name)
        return list(result.data) if result is not None and result.data is not None else []

    @property
    def is_loading(self) -> bool:
        return any(r is None or r.is_loading for r in self.results.values())

    @property
    def error(self) -> Optional[str]:
        for result in self.results.values():
            if result is not None and result.is_error:
                return describe_failure(result.error)
        return None


class ServicesView(PublicView):
    """Services page; shows the two built-in services when loading fails"""

    sources = {"services": (("services",), "/api/services")}

    @property
    def is_fallback(self) -> bool:
        result = self.results["services"]
        return result is not None and result.is_error and not result.data

    @property
    def services(self) -> List[dict]:
        if self.is_fallback:
            return [dict(s) for s in FALLBACK_SERVICES]
        return [s for s in self.rows("services") if s.get("is_active", True)]

    def icon_for(self, service: dict) -> Icon:
        return service_icon(service.get("icon"))


class PackagesView(PublicView):
    """Pricing packages; the server only returns active ones"""

    sources = {"packages": (("packages",), "/api/packages")}

    @property
    def packages(self) -> List[dict]:
        return self.rows("packages")

    @property
    def recommended(self) -> Optional[dict]:
        return next((p for p in self.packages if p.get("is_recommended")), None)


class FeaturedProjects(PublicView):
    sources = {"projects": (("projects",), "/api/projects")}

    @property
    def projects(self) -> List[dict]:
        return [p for p in self.rows("projects") if p.get("featured")]

    @staticmethod
    def tech_preview(project: dict, limit: int = 3) -> List[str]:
        return list(project.get("tech_stack") or [])[:limit]


class ActivityFeed(PublicView):
    sources = {"activity": (("activity",), "/api/activity")}

    @property
    def entries(self) -> List[dict]:
        return [
            {**entry, "icon": activity_icon(entry.get("type"))}
            for entry in self.rows("activity")
        ]


def _event_day(event: dict) -> Optional[date]:
    value = event.get("event_date")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


class EventsView(PublicView):
    """Events page with category/status/search filters"""

    sources = {"events": (("events",), "/api/events")}

    def __init__(self, app: "ClientApp", today: Optional[date] = None):
        super().__init__(app)
        self.today = today

    def _today(self) -> date:
        return self.today or datetime.now(timezone.utc).date()

    def filter(self, category: str = "all", status: str = "all", search: str = "") -> List[dict]:
        term = search.strip().lower()
        matches = []
        for event in self.rows("events"):
            if category != "all" and event.get("category") != category:
                continue
            if status != "all" and event.get("status") != status:
                continue
            if term:
                haystack = " ".join(
                    (event.get(field) or "") for field in ("title", "description", "location")
                ).lower()
                if term not in haystack:
                    continue
            matches.append(event)
        return matches

    @property
    def categories(self) -> List[str]:
        seen = []
        for event in self.rows("events"):
            category = event.get("category")
            if category and category not in seen:
                seen.append(category)
        return seen

    def _is_upcoming(self, event: dict) -> bool:
        if event.get("status") == "completed":
            return False
        day = _event_day(event)
        return day is None or day >= self._today()

    @property
    def upcoming(self) -> List[dict]:
        return [e for e in self.rows("events") if self._is_upcoming(e)]

    @property
    def past(self) -> List[dict]:
        events = [e for e in self.rows("events") if not self._is_upcoming(e)]
        return sorted(events, key=lambda e: _event_day(e) or date.min, reverse=True)

    @property
    def featured(self) -> List[dict]:
        return [e for e in self.rows("events") if e.get("featured")]


class FeedbackView(PublicView):
    sources = {"feedback": (("feedback",), "/api/feedback")}

    @property
    def entries(self) -> List[dict]:
        return [f for f in self.rows("feedback") if f.get("is_approved", True)]

    @property
    def average_rating(self) -> Optional[float]:
        ratings = [f["rating"] for f in self.entries if f.get("rating")]
        if not ratings:
            return None
        return round(sum(ratings) / len(ratings), 1)


def years_of_innovation(today: date, founded: date = FOUNDED) -> int:
    """1 in the founding year, +1 on each anniversary"""
    years = today.year - founded.year
    if (today.month, today.day) < (founded.month, founded.day):
        years -= 1
    return max(1, years + 1)


class StatsCounter(PublicView):
    """Home page counters"""

    sources = {
        "projects": (("projects",), "/api/projects"),
        "team": (("team",), "/api/team"),
    }

    def __init__(self, app: "ClientApp", today: Optional[date] = None):
        super().__init__(app)
        self.today = today

    @property
    def ongoing_projects(self) -> int:
        return len([p for p in self.rows("projects") if (p.get("status") or "active") != "completed"])

    @property
    def team_size(self) -> int:
        return len(self.rows("team"))

    @property
    def years(self) -> int:
        return years_of_innovation(self.today or datetime.now(timezone.utc).date())

    def stats(self) -> List[dict]:
        return [
            {"label": "Ongoing Projects", "value": self.ongoing_projects},
            {"label": "Team Members", "value": self.team_size},
            {"label": "Years of Innovation", "value": self.years},
            {"label": "Working Hours", "value": WORKING_HOURS},
        ]


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


class PublicForm:
    """
    Public form posting one record

    Blank required fields block submission client-side; server failures keep
    the values so the visitor can retry.
    """

    path: str = ""
    required_fields: Sequence[str] = ()
    invalidates: Sequence[Tuple[str, ...]] = ()
    defaults: Dict[str, Any] = {}
    success_message = "Thank you!"

    def __init__(self, app: "ClientApp"):
        self.app = app
        self.values: Dict[str, Any] = dict(self.defaults)
        self.state = FormState.EDITING
        self.error: Optional[str] = None
        self.message: Optional[str] = None

    def set_field(self, name: str, value: Any) -> None:
        self.values[name] = value
        if self.state in (FormState.SUBMITTED, FormState.FAILED):
            self.state = FormState.EDITING

    @property
    def missing_fields(self) -> List[str]:
        return [name for name in self.required_fields if is_blank(self.values.get(name))]

    @property
    def can_submit(self) -> bool:
        return self.state is not FormState.SUBMITTING and not self.missing_fields

    def validate(self) -> None:
        missing = self.missing_fields
        if missing:
            raise ValidationFailure(f"Please fill in: {', '.join(missing)}", fields=missing)

    def to_payload(self) -> Dict[str, Any]:
        payload = {}
        for name, value in self.values.items():
            if isinstance(value, str):
                value = value.strip() or None
            payload[name] = value
        return payload

    def reset(self) -> None:
        self.values = dict(self.defaults)

    async def submit(self) -> MutationResult:
        self.validate()
        payload = self.to_payload()

        self.state = FormState.SUBMITTING
        self.error = None

        result = await self.app.mutations.mutate(
            lambda: self.app.api.request(self.path, "POST", payload),
            invalidates=self.invalidates
        )

        if result.ok:
            self.state = FormState.SUBMITTED
            self.message = self.success_message
            self.reset()
        else:
            self.state = FormState.FAILED
            self.error = describe_failure(result.error)

        return result


class ApplyForm(PublicForm):
    path = "/api/applications"
    required_fields = ("name", "email")
    invalidates = (("applications",),)
    defaults = {"name": "", "email": "", "role": "", "portfolio_url": "", "resume_url": "", "message": ""}
    success_message = "Application submitted! We'll be in touch soon."

    def validate(self) -> None:
        super().validate()
        if "@" not in str(self.values.get("email", "")):
            raise ValidationFailure("Please enter a valid email address", fields=["email"])


class FeedbackForm(PublicForm):
    """Visitor feedback; a blank name is sent as Anonymous"""
    path = "/api/feedback"
    required_fields = ("rating", "message")
    invalidates = (("feedback",), ("admin-feedback",))
    defaults = {"name": "", "email": "", "rating": 0, "message": "", "project_id": None}
    success_message = "Thanks for your feedback!"

    def validate(self) -> None:
        missing = [name for name in self.missing_fields if name != "rating"]
        rating = self.values.get("rating")
        if not isinstance(rating, int) or not 1 <= rating <= 5:
            missing.insert(0, "rating")
        if missing:
            raise ValidationFailure(f"Please fill in: {', '.join(missing)}", fields=missing)

    @property
    def can_submit(self) -> bool:
        try:
            self.validate()
        except ValidationFailure:
            return False
        return self.state is not FormState.SUBMITTING

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["name"] = payload.get("name") or "Anonymous"
        return payload


class ContactForm(PublicForm):
    path = "/api/contact"
    required_fields = ("name", "email", "reason", "message")
    defaults = {"name": "", "email": "", "reason": "", "message": ""}
    success_message = "Thanks for reaching out! We'll get back to you soon."


class ChatSession:
    """
    Chat widget conversation

    One request per user message; any failure is replaced by an assistant
    message pointing to the team mailbox.
    """

    greeting = "Hi! I'm the HighFive assistant. Ask me anything about our services, projects or team."

    def __init__(self, app: "ClientApp", team_email: Optional[str] = None):
        self.app = app
        self.team_email = team_email or settings.TEAM_EMAIL
        self.messages: List[Dict[str, str]] = [{"role": "assistant", "content": self.greeting}]
        self.sending = False

    def fallback_message(self) -> str:
        return (
            "Sorry, I'm having trouble connecting to the AI service right now. "
            f"Please try again later or contact us directly at {self.team_email}."
        )

    async def send(self, text: str) -> str:
        text = (text or "").strip()
        if not text:
            raise ValidationFailure("Message is empty", fields=["message"])

        self.messages.append({"role": "user", "content": text})
        self.sending = True
        try:
            body = await self.app.api.request("/api/chat", "POST", {"messages": self.messages[1:]})
            reply = (body or {}).get("reply") or self.fallback_message()
        except HighFiveError as e:
            logger.warning("Chat request failed: %s", e.message)
            reply = self.fallback_message()
        finally:
            self.sending = False

        self.messages.append({"role": "assistant", "content": reply})
        return reply
