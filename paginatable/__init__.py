"""Page number/size normalization and LIMIT/OFFSET helpers for SQLAlchemy resources."""

from paginatable.schemas.pagination import (
    NormalizedPage,
    PageDescriptor,
    PaginationConfig,
    PaginationResult,
)
from paginatable.services.pagination import (
    PaginatedResource,
    Pagination,
    PaginationConfigurationError,
    pagination,
)
from paginatable.services.params import compute_offset, looks_like_integer, normalize, to_integer

configure = pagination.configure
attach = pagination.attach

__all__ = [
    "NormalizedPage",
    "PageDescriptor",
    "PaginatedResource",
    "Pagination",
    "PaginationConfig",
    "PaginationConfigurationError",
    "PaginationResult",
    "attach",
    "compute_offset",
    "configure",
    "looks_like_integer",
    "normalize",
    "pagination",
    "to_integer",
]
