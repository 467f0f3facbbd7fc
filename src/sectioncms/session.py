"""Form sessions: one section document being edited, with its mutation operations.

All mutations report through ``MutationResult`` and never raise. Values are
passed through the normalizer before they are written, and array operations
act in place on the array stored at the given path.
"""

import copy
import logging
import math
import threading
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from pydantic import BaseModel, ValidationError

from .defaults import derive_default
from .diagnostics import Diagnostics
from .document import ContentDocument
from .editor_schema import Form
from .enums import DiagnosticKind, Kind, UIGroup
from .errors import PersistenceError, SubmissionPendingError, SubmissionValidationError
from .introspect import resolve, schema_at
from .nodes import MISSING
from .normalizer import normalize, normalize_document
from .storages.base import ContentStore, StoreResult
from .utils import PathSegment, as_path, format_path, get_at, set_at, validation_messages
from .walker import WalkContext, build_form

logger = logging.getLogger(__name__)


class MutationResult(BaseModel):
    ok: bool
    path: list[PathSegment] = []
    message: str = ""
    value: Any = None


def parse_number_input(value: Any) -> Any:
    """Parse text typed into a numeric input; an empty input reads as ``0``.

    Returns ``None`` for text that is not a finite number. Other values are
    returned unchanged for the normalizer to judge.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not text:
        return 0
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer() and text.lstrip("+-").isdigit():
        return int(number)
    return number


class FormSession:
    def __init__(
        self,
        contract,
        document: ContentDocument,
        *,
        content_id: int | None = None,
        page_id: int | None = None,
        page_links: Iterable[str] = (),
        repair_threshold: int = 0,
    ):
        self.contract = contract
        self.document = document
        self.content_id = content_id
        self.page_id = page_id
        self.repair_threshold = repair_threshold
        self.diagnostics = Diagnostics()
        self.context = WalkContext(
            bucket=contract.bucket if contract is not None else None,
            diagnostics=self.diagnostics,
            page_links=list(page_links),
        )
        self._submit_lock = threading.Lock()

        if contract is not None:
            document.data = normalize_document(contract, document.data, self.diagnostics)

    @classmethod
    def new(
        cls,
        contract,
        *,
        page_id: int | None = None,
        order_index: int = 0,
        published: bool = False,
        **kwargs,
    ) -> "FormSession":
        """Open a session for a brand-new section initialised from default data."""
        document = ContentDocument(
            section_type=contract.type_id,
            order_index=order_index,
            published=published,
            data=contract.new_data(),
        )
        return cls(contract, document, page_id=page_id, **kwargs)

    @property
    def type_id(self) -> str:
        return self.document.section_type

    @property
    def data(self) -> Any:
        return self.document.data

    @property
    def read_only(self) -> bool:
        return self.contract is None

    def render(self) -> Form:
        return build_form(
            self.contract, self.document, self.context, repair_threshold=self.repair_threshold
        )

    # ---- mutations -------------------------------------------------------

    def _reject(self, path, message: str) -> MutationResult:
        self.diagnostics.record(DiagnosticKind.MUTATION_REJECTED, path, message)
        return MutationResult(ok=False, path=list(path), message=message)

    def _resolve_target(self, path):
        if self.contract is None:
            return None, f"Section type {self.type_id!r} has no contract and is read-only"
        node = schema_at(self.contract.root_schema, path)
        if node is None:
            return None, f"No field at {format_path(path) or '<root>'}"
        return node, ""

    def _array_at(self, path, node) -> list | None:
        array = get_at(self.document.data, path)
        if isinstance(array, list):
            return array
        repaired = normalize(node, array, self.diagnostics, path)
        if path and set_at(self.document.data, path, repaired):
            return repaired
        return None

    def set_scalar(self, path: Iterable[PathSegment] | str, value: Any) -> MutationResult:
        """Write a scalar value at ``path``; the value is normalized to the field's kind."""
        path = as_path(path)
        node, error = self._resolve_target(path)
        if node is None:
            return self._reject(path, error)

        kind, _ = resolve(node)
        if kind in (Kind.OBJECT, Kind.ARRAY):
            return self._reject(path, f"{format_path(path)} is an {kind.value}, not a scalar")

        if kind is Kind.NUMBER:
            parsed = parse_number_input(value)
            if parsed is None:
                return self._reject(path, f"{value!r} is not a number")
            value = parsed

        normalized = normalize(node, value, self.diagnostics, path)
        if not set_at(self.document.data, path, normalized):
            return self._reject(path, f"Parent of {format_path(path)} does not exist")
        return MutationResult(ok=True, path=list(path), value=normalized)

    def splice_array(
        self,
        path: Iterable[PathSegment] | str,
        index: int,
        count: int,
        items: Sequence[Any] = (),
    ) -> MutationResult:
        """Remove ``count`` elements at ``index`` and insert ``items`` in their place."""
        path = as_path(path)
        node, error = self._resolve_target(path)
        if node is None:
            return self._reject(path, error)

        kind, inner = resolve(node)
        if kind is not Kind.ARRAY:
            return self._reject(path, f"{format_path(path)} is not an array")

        array = self._array_at(path, node)
        if array is None:
            return self._reject(path, f"Parent of {format_path(path)} does not exist")
        if not 0 <= index <= len(array):
            return self._reject(path, f"Index {index} is out of range for {len(array)} items")
        if count < 0:
            return self._reject(path, f"Cannot remove {count} items")

        new_items = [
            normalize(inner.element, item, self.diagnostics, path + (index + offset,))
            for offset, item in enumerate(items)
        ]
        array[index : index + count] = new_items
        return MutationResult(ok=True, path=list(path), value=copy.deepcopy(array))

    def move_array_item(
        self, path: Iterable[PathSegment] | str, source: int, target: int
    ) -> MutationResult:
        path = as_path(path)
        node, error = self._resolve_target(path)
        if node is None:
            return self._reject(path, error)
        if resolve(node)[0] is not Kind.ARRAY:
            return self._reject(path, f"{format_path(path)} is not an array")

        array = self._array_at(path, node)
        if array is None:
            return self._reject(path, f"Parent of {format_path(path)} does not exist")
        size = len(array)
        if not (0 <= source < size and 0 <= target < size):
            return self._reject(path, f"Cannot move item {source} to {target} in {size} items")

        if source != target:
            array.insert(target, array.pop(source))
        return MutationResult(ok=True, path=list(path), value=copy.deepcopy(array))

    def append_item(self, path: Iterable[PathSegment] | str, item: Any = MISSING) -> MutationResult:
        """Append ``item``, or the element schema's default when no item is given."""
        path = as_path(path)
        node, error = self._resolve_target(path)
        if node is None:
            return self._reject(path, error)
        kind, inner = resolve(node)
        if kind is not Kind.ARRAY:
            return self._reject(path, f"{format_path(path)} is not an array")

        if item is MISSING:
            item = derive_default(inner.element)
        current = get_at(self.document.data, path)
        size = len(current) if isinstance(current, list) else 0
        return self.splice_array(path, size, 0, [item])

    def remove_item(self, path: Iterable[PathSegment] | str, index: int) -> MutationResult:
        path = as_path(path)
        current = get_at(self.document.data, path)
        size = len(current) if isinstance(current, list) else 0
        if self.contract is not None and not 0 <= index < size:
            return self._reject(path, f"Index {index} is out of range for {size} items")
        return self.splice_array(path, index, 1)

    def move_up(self, path: Iterable[PathSegment] | str, index: int) -> MutationResult:
        """Swap an element with its predecessor; no-op for the first element."""
        if index == 0:
            return self._boundary_noop(path)
        return self.move_array_item(path, index, index - 1)

    def move_down(self, path: Iterable[PathSegment] | str, index: int) -> MutationResult:
        """Swap an element with its successor; no-op for the last element."""
        path = as_path(path)
        current = get_at(self.document.data, path)
        if isinstance(current, list) and index == len(current) - 1:
            return self._boundary_noop(path)
        return self.move_array_item(path, index, index + 1)

    def _boundary_noop(self, path) -> MutationResult:
        path = as_path(path)
        current = get_at(self.document.data, path)
        return MutationResult(
            ok=True, path=list(path), message="Already at the boundary", value=copy.deepcopy(current)
        )

    def toggle_group(self, path: Iterable[PathSegment] | str, group: UIGroup | str) -> MutationResult:
        """Expand or collapse a UI group. Presentation state only, the document is untouched."""
        path = as_path(path)
        try:
            group = UIGroup(group)
        except ValueError:
            return self._reject(path, f"Unknown group {group!r}")
        collapsed = self.context.toggle(path, group)
        return MutationResult(ok=True, path=list(path), value={"group": group, "collapsed": collapsed})

    def set_published(self, published: bool) -> MutationResult:
        if not isinstance(published, bool):
            return self._reject(("published",), f"{published!r} is not a boolean")
        self.document.published = published
        return MutationResult(ok=True, path=["published"], value=published)

    def set_order_index(self, order_index: Any) -> MutationResult:
        parsed = parse_number_input(order_index)
        if isinstance(parsed, float) and parsed.is_integer():
            parsed = int(parsed)
        if not isinstance(parsed, int) or isinstance(parsed, bool) or parsed < 0:
            return self._reject(("order_index",), f"{order_index!r} is not a non-negative integer")
        self.document.order_index = parsed
        return MutationResult(ok=True, path=["order_index"], value=parsed)

    # ---- submission ------------------------------------------------------

    @property
    def pending(self) -> bool:
        return self._submit_lock.locked()

    def validate(self) -> dict:
        """Validate the document against its contract.

        Returns a copy of the data ready to persist. Raises
        ``SubmissionValidationError`` with field-level messages otherwise.
        """
        if self.contract is None:
            raise SubmissionValidationError(
                f"Section type {self.type_id!r} has no contract",
                [("section_type", "No contract registered")],
            )

        errors: list[tuple[str, str]] = []
        try:
            ContentDocument.model_validate(self.document.model_dump())
        except ValidationError as e:
            errors.extend(validation_messages(e))

        try:
            self.contract.validate(self.document.data)
        except ValidationError as e:
            errors.extend(
                (f"data -> {loc}" if loc else "data", msg) for loc, msg in validation_messages(e)
            )

        if errors:
            summary = "; ".join(f"{loc}: {msg}" for loc, msg in errors)
            raise SubmissionValidationError(f"Section data is not valid: {summary}", errors)

        data = self.document.data
        return copy.deepcopy(dict(data) if isinstance(data, Mapping) else data)

    def submit(self, store: ContentStore, page_id: int | None = None) -> StoreResult:
        """Validate and persist the document.

        Only one submission may be outstanding per session. The document is
        kept as it is when validation or persistence fails.
        """
        if not self._submit_lock.acquire(blocking=False):
            raise SubmissionPendingError("A submission for this section is already in progress")

        try:
            data = self.validate()
            if self.content_id is None:
                target_page = page_id if page_id is not None else self.page_id
                if target_page is None:
                    raise SubmissionValidationError(
                        "A page is required to create a section", [("page_id", "Field required")]
                    )
                result = store.create_content(
                    target_page,
                    self.type_id,
                    data,
                    self.document.published,
                    self.document.order_index,
                )
            else:
                result = store.update_content(
                    self.content_id, data, self.document.published, self.document.order_index
                )

            if not result.success:
                raise PersistenceError(result.error or "The content store rejected the section")

            if self.content_id is None:
                self.content_id = result.content_id
                self.page_id = target_page
            logger.info(f"Section {self.content_id} ({self.type_id}) saved")
            return result
        finally:
            self._submit_lock.release()
