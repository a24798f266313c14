"""Pagination value types shared by the normalizer and the facade."""

from pydantic import BaseModel, ConfigDict, Field


class PaginationConfig(BaseModel):
    """Pagination defaults for the process or for a single resource."""

    model_config = ConfigDict(frozen=True, extra="allow")

    size: int = Field(default=20, ge=1)


class NormalizedPage(BaseModel):
    """Sanitized page number and page size."""

    model_config = ConfigDict(frozen=True)

    page_number: int
    page_size: int


class PaginationResult(BaseModel):
    """LIMIT/OFFSET pair for the query layer."""

    model_config = ConfigDict(frozen=True)

    limit: int
    offset: int


class PageDescriptor(BaseModel):
    """Public page shape returned by current/next page lookups."""

    model_config = ConfigDict(frozen=True)

    number: int
    size: int

    def as_params(self) -> dict[str, int]:
        """Return the descriptor as raw page params, e.g. for building links."""
        return {"number": self.number, "size": self.size}
