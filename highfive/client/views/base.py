"""
Collection Screen
List-and-edit state machine shared by the admin screens
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING
from highfive.client.api import describe_failure
from highfive.client.errors import HighFiveError, ValidationFailure
from highfive.client.mutations import MutationResult
from highfive.client.query_cache import QueryResult, Subscription

if TYPE_CHECKING:
    from highfive.client.app import ClientApp

logger = logging.getLogger(__name__)


class ScreenState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
    ADDING_NEW = "adding_new"
    EDITING = "editing"
    SUBMITTING = "submitting"
    ADD_FAILED = "add_failed"


# States where the list view owns the screen (cache updates may move it)
LIST_STATES = (ScreenState.IDLE, ScreenState.LOADING, ScreenState.LOADED, ScreenState.LOAD_FAILED)
DRAFT_STATES = (ScreenState.ADDING_NEW, ScreenState.EDITING, ScreenState.ADD_FAILED)


class InvalidTransition(HighFiveError):
    """Action not allowed in the screen's current state"""


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def split_text(value: Any, separator: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [part.strip() for part in str(value).split(separator) if part.strip()]


class CollectionScreen:
    """
    One admin entity screen.

    IDLE -> LOADING -> LOADED | LOAD_FAILED, then
    LOADED -> ADDING_NEW | EDITING -> SUBMITTING -> LOADED | ADD_FAILED.
    Delete goes LOADED -> SUBMITTING -> LOADED with no confirmation.
    The draft belongs to the screen; rows come from the query cache.

    Subclasses describe the collection with class attributes:

    - ``key``: query key of the list
    - ``path``: list endpoint; ``write_path`` for writes when different
    - ``required_fields``: fields that must be non-blank to submit
    - ``list_fields``: form text split into lists, field -> separator
    - ``int_fields`` / ``bool_fields``: form values coerced on submit
    - ``defaults``: initial draft for a new row
    - ``extra_invalidates``: other keys that show the same rows
    """

    key: Tuple[str, ...] = ()
    path: str = ""
    write_path: Optional[str] = None
    required_fields: Sequence[str] = ()
    list_fields: Dict[str, str] = {}
    int_fields: Sequence[str] = ()
    bool_fields: Sequence[str] = ()
    defaults: Dict[str, Any] = {}
    extra_invalidates: Sequence[Tuple[str, ...]] = ()
    creatable = True
    editable = True
    deletable = True

    def __init__(self, app: "ClientApp"):
        self.app = app
        self.state = ScreenState.IDLE
        self.rows: List[dict] = []
        self.error: Optional[str] = None
        self.draft: Optional[Dict[str, Any]] = None
        self.editing_id: Optional[str] = None
        self.pending_id: Optional[str] = None
        self._subscription: Optional[Subscription] = None
        self._listeners: List[Callable[["CollectionScreen"], None]] = []

    # Wiring

    @property
    def invalidation_keys(self) -> List[Tuple[str, ...]]:
        return [self.key, *self.extra_invalidates]

    def on_change(self, listener: Callable[["CollectionScreen"], None]) -> None:
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    async def fetch_rows(self) -> List[dict]:
        return await self.app.api.request(self.path) or []

    def load(self) -> None:
        """Subscribe to the list query (IDLE -> LOADING)"""
        if self._subscription is None:
            self._subscription = self.app.cache.subscribe(self.key, self.fetch_rows, self._on_result)

    def close(self) -> None:
        """Stop observing the cache; an in-flight fetch still completes"""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_result(self, result: QueryResult) -> None:
        if result.data is not None:
            self.rows = list(result.data)

        if self.state in LIST_STATES:
            if result.is_loading:
                self.state = ScreenState.LOADING
            elif result.is_error and result.data is None:
                self.state = ScreenState.LOAD_FAILED
                self.error = describe_failure(result.error)
            else:
                self.state = ScreenState.LOADED
                self.error = describe_failure(result.error) if result.is_error else None

        self._changed()

    def _require(self, *states: ScreenState) -> None:
        if self.state not in states:
            raise InvalidTransition(f"Not allowed while {self.state.value}")

    def find(self, row_id: str) -> Optional[dict]:
        for row in self.rows:
            if str(row.get("id")) == str(row_id):
                return row
        return None

    # Draft editing

    def start_new(self) -> None:
        if not self.creatable:
            raise InvalidTransition("This list is read-only")
        self._require(ScreenState.LOADED)
        self.draft = dict(self.defaults)
        self.editing_id = None
        self.error = None
        self.state = ScreenState.ADDING_NEW
        self._changed()

    def start_edit(self, row_id: str) -> None:
        if not self.editable:
            raise InvalidTransition("Rows on this screen cannot be edited")
        self._require(ScreenState.LOADED)
        row = self.find(row_id)
        if row is None:
            raise InvalidTransition(f"No row with id {row_id}")
        self.draft = self.form_from_row(row)
        self.editing_id = str(row_id)
        self.error = None
        self.state = ScreenState.EDITING
        self._changed()

    def set_field(self, name: str, value: Any) -> None:
        self._require(*DRAFT_STATES)
        self.draft[name] = value

    def update_draft(self, **values: Any) -> None:
        self._require(*DRAFT_STATES)
        self.draft.update(values)

    def cancel(self) -> None:
        self._require(*DRAFT_STATES)
        self.draft = None
        self.editing_id = None
        self.error = None
        self.state = ScreenState.LOADED
        self._changed()

    @property
    def missing_fields(self) -> List[str]:
        if self.draft is None:
            return list(self.required_fields)
        return [name for name in self.required_fields if is_blank(self.draft.get(name))]

    @property
    def can_submit(self) -> bool:
        return self.state in DRAFT_STATES and not self.missing_fields

    def form_from_row(self, row: dict) -> Dict[str, Any]:
        """Row -> editable draft (list fields joined back into text)"""
        draft = {}
        for name, value in row.items():
            if name in ("id", "created_at", "updated_at"):
                continue
            separator = self.list_fields.get(name)
            if separator is not None and isinstance(value, list):
                joiner = separator if separator == "\n" else f"{separator} "
                value = joiner.join(value)
            draft[name] = value
        return draft

    def to_payload(self, draft: Dict[str, Any]) -> Dict[str, Any]:
        """Draft -> request body"""
        payload = {}
        for name, value in draft.items():
            if name in self.list_fields:
                value = split_text(value, self.list_fields[name])
            elif name in self.int_fields:
                try:
                    value = int(value) if not is_blank(value) else 0
                except (TypeError, ValueError):
                    raise ValidationFailure(f"{name} must be a whole number", fields=[name])
            elif name in self.bool_fields:
                value = bool(value)
            elif isinstance(value, str):
                value = value.strip()
                if not value and name not in self.required_fields:
                    value = None
            payload[name] = value
        return payload

    # Mutations

    def _write_base(self) -> str:
        return self.write_path or self.path

    async def _mutate(self, operation) -> MutationResult:
        return await self.app.mutations.mutate(operation, invalidates=self.invalidation_keys)

    async def submit(self) -> MutationResult:
        """
        Send the draft (POST for new rows, PUT for edits)

        Raises:
            ValidationFailure: when a required field is blank; nothing is sent
        """
        self._require(*DRAFT_STATES)

        missing = self.missing_fields
        if missing:
            raise ValidationFailure(f"Please fill in: {', '.join(missing)}", fields=missing)

        payload = self.to_payload(self.draft)
        editing_id = self.editing_id

        self.state = ScreenState.SUBMITTING
        self.error = None
        self._changed()

        if editing_id is None:
            result = await self._mutate(lambda: self.app.api.request(self._write_base(), "POST", payload))
        else:
            result = await self._mutate(
                lambda: self.app.api.request(f"{self._write_base()}/{editing_id}", "PUT", payload)
            )

        if result.ok:
            self.draft = None
            self.editing_id = None
            self.state = ScreenState.LOADED
        else:
            self.error = describe_failure(result.error)
            self.state = ScreenState.ADD_FAILED

        self._changed()
        return result

    async def delete(self, row_id: str) -> MutationResult:
        """Delete a row immediately (no confirmation step)"""
        if not self.deletable:
            raise InvalidTransition("Rows on this screen cannot be deleted")
        self._require(ScreenState.LOADED)

        self.state = ScreenState.SUBMITTING
        self.pending_id = str(row_id)
        self.error = None
        self._changed()

        result = await self._mutate(lambda: self.app.api.request(f"{self._write_base()}/{row_id}", "DELETE"))

        if not result.ok:
            self.error = describe_failure(result.error)
        self.pending_id = None
        self.state = ScreenState.LOADED
        self._changed()
        return result
