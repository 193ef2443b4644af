"""
Icons
Closed mappings from stored tags to display glyphs
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Icon:
    glyph: str
    color: str


class ActivityKind(str, Enum):
    PROJECT = "project"
    MEMBER = "member"
    ANNOUNCEMENT = "announcement"


class ServiceIconTag(str, Enum):
    CODE = "code"
    SMARTPHONE = "smartphone"
    CLOUD = "cloud"
    PALETTE = "palette"
    DATABASE = "database"
    SHIELD = "shield"


DEFAULT_ICON = Icon("sparkles", "gray")

ACTIVITY_ICONS = {
    ActivityKind.PROJECT: Icon("briefcase", "blue"),
    ActivityKind.MEMBER: Icon("users", "green"),
    ActivityKind.ANNOUNCEMENT: Icon("megaphone", "orange"),
}

SERVICE_ICONS = {
    ServiceIconTag.CODE: Icon("code", "blue"),
    ServiceIconTag.SMARTPHONE: Icon("smartphone", "purple"),
    ServiceIconTag.CLOUD: Icon("cloud", "sky"),
    ServiceIconTag.PALETTE: Icon("palette", "pink"),
    ServiceIconTag.DATABASE: Icon("database", "green"),
    ServiceIconTag.SHIELD: Icon("shield", "red"),
}


def _lookup(enum_cls, mapping, tag: Optional[str]) -> Icon:
    try:
        return mapping[enum_cls((tag or "").strip().lower())]
    except ValueError:
        return DEFAULT_ICON


def activity_icon(kind: Optional[str]) -> Icon:
    """Icon for an activity type; unknown types get the default"""
    return _lookup(ActivityKind, ACTIVITY_ICONS, kind)


def service_icon(tag: Optional[str]) -> Icon:
    """Icon for a service icon tag; unknown tags (or image URLs) get the default"""
    return _lookup(ServiceIconTag, SERVICE_ICONS, tag)
