"""Common Pydantic schemas."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Violation(BaseModel):
    """Inline validation failure."""

    path: str = Field(..., description="Form field the message belongs to")
    message: str = Field(..., description="Validation error message")


class Page(BaseModel, Generic[T]):
    """One page of a list screen."""

    items: List[T] = Field(default_factory=list, description="Rows on this page")
    page: int = Field(1, ge=1, description="1-based page index")
    page_size: int = Field(..., ge=1, description="Rows per page")
    total_items: int = Field(0, ge=0, description="Rows after filtering")
    total_pages: int = Field(0, ge=0, description="Number of pages")
    page_numbers: List[int] = Field(default_factory=list, description="Page buttons to show")

    model_config = {"arbitrary_types_allowed": True}

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
