"""
Pagination Service

Holds the process-wide pagination defaults and attaches pagination to
resources (SQLAlchemy mapped classes or tables).

``configure`` and ``attach`` are meant to run during application setup. They
replace shared state without locking, so concurrent callers must serialize
them.
"""

from collections.abc import Mapping
from typing import Any, Generic, Optional, TypeVar

import structlog
from pydantic import ValidationError
from sqlalchemy import select as sa_select

from paginatable.core.config import get_settings
from paginatable.schemas.pagination import PageDescriptor, PaginationConfig, PaginationResult
from paginatable.services.params import compute_offset, normalize, to_integer

logger = structlog.get_logger()

R = TypeVar("R")
S = TypeVar("S")


class PaginationConfigurationError(RuntimeError):
    """Raised when pagination options are invalid."""


def _merge(base: PaginationConfig, options: Optional[PaginationConfig | Mapping[str, Any]]) -> PaginationConfig:
    if options is None:
        return base
    if isinstance(options, PaginationConfig):
        options = options.model_dump(exclude_unset=True)
    try:
        return PaginationConfig.model_validate({**base.model_dump(), **options})
    except ValidationError as exc:
        raise PaginationConfigurationError(f"Invalid pagination options {dict(options)!r}: {exc}") from exc


class PaginatedResource(Generic[R]):
    """
    A resource paired with its pagination config snapshot.

    The snapshot is taken when the resource is attached; later calls to
    ``Pagination.configure`` do not change it.
    """

    def __init__(self, resource: R, pagination: PaginationConfig) -> None:
        self._resource = resource
        self._pagination = pagination

    @property
    def resource(self) -> R:
        return self._resource

    @property
    def pagination(self) -> PaginationConfig:
        return self._pagination

    def scope_filter(self, params: Any = None) -> PaginationResult:
        """LIMIT/OFFSET for the requested page."""
        page = normalize(params, self._pagination)
        return PaginationResult(
            limit=page.page_size,
            offset=compute_offset(page.page_size, page.page_number),
        )

    def paginate(self, statement: S, params: Any = None) -> S:
        """
        Apply LIMIT/OFFSET for the requested page to a query.

        Works with anything exposing ``limit``/``offset`` (``Select``, legacy
        ``Query``). Ordering is left to the caller.
        """
        scope = self.scope_filter(params)
        return statement.limit(scope.limit).offset(scope.offset)

    def select(self, params: Any = None):
        """Paged ``SELECT`` over the attached mapped class or table."""
        return self.paginate(sa_select(self._resource), params)

    def current_page(self, params: Any = None) -> PageDescriptor:
        page = normalize(params, self._pagination)
        return PageDescriptor(number=page.page_number, size=page.page_size)

    def next_page(self, params: Any = None, total: Any = None) -> Optional[PageDescriptor]:
        """
        Get the page after the requested one.

        Without ``total`` the next page is always returned. With ``total`` it
        is returned only if it holds at least one row; otherwise None.
        """
        current = self.current_page(params)

        if total is None or self.has_next_page(current, total):
            return PageDescriptor(number=current.number + 1, size=current.size)

        return None

    def has_next_page(self, page: Any, total: Any) -> bool:
        """
        True when ``total`` rows extend past the end of ``page``.

        ``total`` is read like a page field; a malformed total counts as 0.
        """
        parsed = normalize(page, self._pagination)
        return to_integer(total, 0) > parsed.page_number * parsed.page_size

    def __repr__(self) -> str:
        name = getattr(self._resource, "__name__", None) or repr(self._resource)
        return f"PaginatedResource({name}, size={self._pagination.size})"


class Pagination:
    """Process-wide pagination defaults and the resource attach step."""

    def __init__(self, options: Optional[PaginationConfig] = None) -> None:
        self._options = options

    @property
    def options(self) -> PaginationConfig:
        # Settings are read on first use, not at import
        if self._options is None:
            try:
                self._options = PaginationConfig(size=get_settings().default_page_size)
            except ValidationError as exc:
                raise PaginationConfigurationError(f"Invalid pagination settings: {exc}") from exc
        return self._options

    @options.setter
    def options(self, value: PaginationConfig) -> None:
        self._options = value

    def configure(self, options: Optional[PaginationConfig | Mapping[str, Any]] = None) -> PaginationConfig:
        """
        Shallow-merge ``options`` into the global defaults.

        Calling without options leaves the defaults untouched. Resources that
        are already attached keep their own snapshot.
        """
        if not options:
            return self.options

        self.options = _merge(self.options, options)
        logger.info("pagination.configure", options=self.options.model_dump())
        return self.options

    def attach(
        self,
        resource: R,
        options: Optional[PaginationConfig | Mapping[str, Any]] = None,
    ) -> PaginatedResource[R]:
        """
        Make a resource paginatable.

        Args:
            resource: Mapped class, table or other selectable
            options: Per-resource overrides of the global defaults

        Returns:
            PaginatedResource wrapping ``resource``
        """
        snapshot = _merge(self.options, options)
        paginated = PaginatedResource(resource, snapshot)
        logger.info("pagination.attach", resource=repr(paginated), size=snapshot.size)
        return paginated


pagination = Pagination()
