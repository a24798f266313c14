from paginatable.schemas.pagination import (
    NormalizedPage,
    PageDescriptor,
    PaginationConfig,
    PaginationResult,
)

__all__ = [
    "NormalizedPage",
    "PageDescriptor",
    "PaginationConfig",
    "PaginationResult",
]
