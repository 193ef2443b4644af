"""
Admin Screens
One list-and-edit screen per managed collection
"""

from typing import Any, Dict, List, Type
from highfive.client.api import describe_failure
from highfive.client.mutations import MutationResult
from highfive.client.views.base import CollectionScreen, InvalidTransition, ScreenState, split_text


class ActivityScreen(CollectionScreen):
    """Activity feed: post and delete entries (no edit)"""
    key = ("activity",)
    path = "/api/activity"
    required_fields = ("type", "title")
    defaults = {"type": "project", "title": ""}
    editable = False


class TeamScreen(CollectionScreen):
    key = ("team",)
    path = "/api/team"
    required_fields = ("name", "role")
    int_fields = ("display_order",)
    defaults = {
        "name": "",
        "role": "",
        "department": "",
        "avatar_url": "",
        "display_order": 0,
        "bio": "",
        "email": "",
        "linkedin": "",
        "status": "Active",
    }


class ServicesScreen(CollectionScreen):
    """Service offerings; features are entered one per line"""
    key = ("services",)
    path = "/api/services"
    required_fields = ("title",)
    list_fields = {"features": "\n"}
    int_fields = ("sort_order",)
    bool_fields = ("is_active",)
    defaults = {
        "title": "",
        "description": "",
        "features": "",
        "icon": "",
        "sort_order": 0,
        "is_active": True,
    }


class PackagesScreen(CollectionScreen):
    """
    Pricing packages

    Features are entered one per line; a line starting with "-" is shown
    as not included.
    """
    key = ("admin-packages",)
    path = "/api/admin/packages"
    required_fields = ("name", "price")
    int_fields = ("sort_order",)
    bool_fields = ("is_recommended", "is_active")
    extra_invalidates = (("packages",),)
    defaults = {
        "name": "",
        "price": "",
        "description": "",
        "features": "",
        "is_recommended": False,
        "sort_order": 0,
        "is_active": True,
    }

    @staticmethod
    def parse_features(text: Any) -> List[Dict[str, Any]]:
        if isinstance(text, list):
            return [dict(f) for f in text]
        features = []
        for line in split_text(text, "\n"):
            if line.startswith("-"):
                name = line[1:].strip()
                if name:
                    features.append({"name": name, "included": False})
            else:
                features.append({"name": line, "included": True})
        return features

    @staticmethod
    def format_features(features: List[Dict[str, Any]]) -> str:
        return "\n".join(
            f["name"] if f.get("included", True) else f"- {f['name']}" for f in features or []
        )

    def form_from_row(self, row: dict) -> Dict[str, Any]:
        draft = super().form_from_row(row)
        draft["features"] = self.format_features(row.get("features"))
        return draft

    def to_payload(self, draft: Dict[str, Any]) -> Dict[str, Any]:
        features = self.parse_features(draft.get("features"))
        payload = super().to_payload({k: v for k, v in draft.items() if k != "features"})
        payload["features"] = features
        return payload


class ProjectsScreen(CollectionScreen):
    """Projects; tech stack is comma-separated, features and case studies one per line"""
    key = ("projects",)
    path = "/api/projects"
    required_fields = ("title",)
    list_fields = {"tech_stack": ",", "key_features": "\n", "case_study_urls": "\n"}
    bool_fields = ("featured",)
    defaults = {
        "title": "",
        "description": "",
        "tagline": "",
        "status": "active",
        "tech_stack": "",
        "key_features": "",
        "image_url": "",
        "github_url": "",
        "demo_url": "",
        "case_study_urls": "",
        "featured": False,
    }


class EventsScreen(CollectionScreen):
    key = ("admin-events",)
    path = "/api/admin/events"
    required_fields = ("title", "event_date")
    list_fields = {"organizers": ",", "tags": ","}
    bool_fields = ("featured",)
    extra_invalidates = (("events",),)
    defaults = {
        "title": "",
        "description": "",
        "event_date": "",
        "location": "",
        "image_url": "",
        "category": "",
        "status": "upcoming",
        "featured": False,
        "organizers": "",
        "tags": "",
        "registration_url": "",
    }


class PartnersScreen(CollectionScreen):
    key = ("network", "partners")
    path = "/api/network/partners"
    required_fields = ("name",)
    defaults = {"name": "", "role": "", "description": "", "logo_url": "", "link_url": ""}


class CollaborationsScreen(CollectionScreen):
    key = ("network", "collaborations")
    path = "/api/network/collaborations"
    required_fields = ("name",)
    defaults = {"name": "", "description": "", "highlight": "", "logo_url": "", "link_url": ""}


class ApplicationsScreen(CollectionScreen):
    """Job applications (read-only)"""
    key = ("applications",)
    path = "/api/applications"
    creatable = False
    editable = False
    deletable = False


class FeedbackScreen(CollectionScreen):
    """Feedback moderation: approve toggle and delete"""
    key = ("admin-feedback",)
    path = "/api/admin/feedback"
    extra_invalidates = (("feedback",),)
    creatable = False
    editable = False

    async def toggle_approval(self, row_id: str) -> MutationResult:
        self._require(ScreenState.LOADED)
        row = self.find(row_id)
        if row is None:
            raise InvalidTransition(f"No row with id {row_id}")

        payload = {"is_approved": not row.get("is_approved", True)}

        self.state = ScreenState.SUBMITTING
        self.pending_id = str(row_id)
        self.error = None
        self._changed()

        result = await self._mutate(
            lambda: self.app.api.request(f"{self.path}/{row_id}", "PUT", payload)
        )

        if not result.ok:
            self.error = describe_failure(result.error)
        self.pending_id = None
        self.state = ScreenState.LOADED
        self._changed()
        return result


ADMIN_SCREENS: Dict[str, Type[CollectionScreen]] = {
    "activity": ActivityScreen,
    "team": TeamScreen,
    "services": ServicesScreen,
    "packages": PackagesScreen,
    "projects": ProjectsScreen,
    "events": EventsScreen,
    "partners": PartnersScreen,
    "collaborations": CollaborationsScreen,
    "applications": ApplicationsScreen,
    "feedback": FeedbackScreen,
}
