"""Page descriptors and page records for listing queries."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from app.core.errors import Ok, Result, validation_failed

T = TypeVar("T")

DEFAULT_PAGE = 0
DEFAULT_SIZE = 10
MAX_SIZE = 100
# Databases take OFFSET as a signed 64-bit integer.
MAX_OFFSET = 2**63 - 1
DEFAULT_SORT_FIELD = "createdAt"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class PageRequest:
    """Which slice of a result set to return and in what order."""

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE
    sort_field: str = DEFAULT_SORT_FIELD
    sort_direction: SortDirection = SortDirection.DESC

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def parse(
        cls,
        page: int,
        size: int,
        sort_field: str,
        sort_direction: str,
        sortable_fields: frozenset[str],
    ) -> Result["PageRequest"]:
        """Build a descriptor from raw query values, collecting every invalid field."""
        errors: list[dict[str, str]] = []
        if page < 0:
            errors.append({"field": "page", "message": "Page index must not be less than zero"})
        elif page * max(size, 1) > MAX_OFFSET:
            errors.append({"field": "page", "message": "Page index is too large"})
        if size < 1 or size > MAX_SIZE:
            errors.append(
                {"field": "size", "message": f"Page size must be between 1 and {MAX_SIZE}"}
            )
        if sort_field not in sortable_fields:
            errors.append(
                {
                    "field": "sortBy",
                    "message": "Sort field must be one of: " + ", ".join(sorted(sortable_fields)),
                }
            )
        direction = (sort_direction or "").strip().upper()
        if direction not in SortDirection.__members__:
            errors.append({"field": "sortDirection", "message": "Sort direction must be ASC or DESC"})
        if errors:
            return validation_failed(errors)
        return Ok(cls(page, size, sort_field, SortDirection(direction)))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus totals for the whole result set."""

    items: list[T]
    total_elements: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0
