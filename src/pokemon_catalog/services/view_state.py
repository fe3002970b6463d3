"""Browsing state: selected types and current page.

The state mirrors a URL query of the form ``type=grass,poison&page=2``
(``type`` omitted when nothing is selected, ``page`` 1-based). Every
change recomputes the visible page through the pipeline and reports the
rewritten query to an optional ``on_change`` hook, which plays the role
of an in-place history update.
"""

from collections.abc import Callable, Mapping, Sequence
from urllib.parse import urlencode

from pokemon_catalog.entities import PageResult, Pokemon

from . import pipeline


def parse_type_param(value: str | None) -> tuple[str, ...]:
    """Parse ``type=a,b`` into an ordered, de-duplicated selection."""
    if not value:
        return ()
    return pipeline.normalize_selection(part.strip().lower() for part in value.split(","))


def parse_page_param(value: str | None) -> int:
    """Parse a 1-based ``page`` value into a zero-based page number.

    Missing, malformed or non-positive values fall back to the first page.
    """
    try:
        page = int(value) if value is not None else 1
    except ValueError:
        return 0
    return page - 1 if page >= 1 else 0


class ViewStateController:
    """Owns ``(selected_types, page)`` over a loaded collection.

    Example:
        ```python
        view = ViewStateController.from_query(pokemon, {"type": "grass", "page": "2"})
        view.toggle_type("poison")   # page resets to 0
        view.next_page()
        print(view.to_query())       # "type=grass,poison&page=2"
        ```
    """

    def __init__(
        self,
        pokemon: Sequence[Pokemon],
        selected_types: Sequence[str] = (),
        page: int = 0,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the controller and compute the first page.

        Args:
            pokemon: The full collection
            selected_types: Initial selection, in selection order
            page: Initial zero-based page
            on_change: Called with the new query string after each change
        """
        self._pokemon = pokemon
        self._selected: tuple[str, ...] = pipeline.normalize_selection(selected_types)
        self._page = max(0, page)
        self._on_change = on_change
        self._result = self._compute()

    @classmethod
    def from_query(
        cls,
        pokemon: Sequence[Pokemon],
        params: Mapping[str, str | None],
        on_change: Callable[[str], None] | None = None,
    ) -> "ViewStateController":
        """Build the controller from URL query parameters.

        Args:
            pokemon: The full collection
            params: Mapping with optional ``type`` and ``page`` entries

        Returns:
            Controller initialized before any result is rendered
        """
        return cls(
            pokemon,
            selected_types=parse_type_param(params.get("type")),
            page=parse_page_param(params.get("page")),
            on_change=on_change,
        )

    def _compute(self) -> PageResult:
        result = pipeline.apply(self._pokemon, self._selected, self._page)
        if result.total_count == 0:
            self._page = 0
        return result

    def _changed(self) -> None:
        self._result = self._compute()
        if self._on_change is not None:
            self._on_change(self.to_query())

    def toggle_type(self, name: str) -> None:
        """Add ``name`` to the selection if absent, remove it if present.

        The page always resets to the first one.
        """
        name = name.strip().lower()
        if not name:
            return
        if name in self._selected:
            self._selected = tuple(t for t in self._selected if t != name)
        else:
            self._selected = self._selected + (name,)
        self._page = 0
        self._changed()

    def go_to_page(self, delta: int) -> bool:
        """Move ``delta`` pages forward (positive) or backward (negative).

        Moving forward from the last page or backward from the first
        page is a no-op; there is no wraparound.

        Returns:
            True if the page changed
        """
        if delta > 0 and self._page >= self.total_pages - 1:
            return False
        if delta < 0 and self._page <= 0:
            return False
        if delta == 0:
            return False
        target = max(0, min(self._page + delta, self.total_pages - 1))
        if target == self._page:
            return False
        self._page = target
        self._changed()
        return True

    def next_page(self) -> bool:
        return self.go_to_page(1)

    def previous_page(self) -> bool:
        return self.go_to_page(-1)

    def to_query(self) -> str:
        """Render the state as ``type=<comma-joined>&page=<1-based>``."""
        params: dict[str, str] = {}
        if self._selected:
            params["type"] = ",".join(self._selected)
        params["page"] = str(self._page + 1)
        return urlencode(params, safe=",")

    @property
    def selected_types(self) -> tuple[str, ...]:
        return self._selected

    @property
    def page(self) -> int:
        """Zero-based current page."""
        return self._page

    @property
    def result(self) -> PageResult:
        return self._result

    @property
    def total_pages(self) -> int:
        return self._result.total_pages

    @property
    def has_next(self) -> bool:
        return self._page < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self._page > 0
