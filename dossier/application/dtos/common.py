"""Shared DTOs: pagination."""

from dataclasses import dataclass

from dossier.core.constants import MAX_PAGE_SIZE
from dossier.domain.exceptions import ValidationException


@dataclass(frozen=True)
class PageRequest:
    """1-based page request validated against the listing bounds."""

    page: int
    size: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationException("page must be greater than or equal to 1", field="page")
        if self.size < 1 or self.size > MAX_PAGE_SIZE:
            raise ValidationException(
                f"size must be between 1 and {MAX_PAGE_SIZE}", field="size"
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


@dataclass(frozen=True)
class Page[ItemType]:
    """One page of results plus the total count."""

    items: list[ItemType]
    count: int
