"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

TreeOrder = Literal["created", "title"]


def _blank_to_none(value):
    """An empty parent selection means the root level."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article. ``slug`` is derived from the title when omitted."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started with React"])
    content: str = Field(..., min_length=1, examples=["# Getting Started\n\nReact is a library..."])
    slug: str | None = Field(None, max_length=255, examples=["getting-started-with-react"])
    parent_id: str | None = Field(None, max_length=36)

    @field_validator("parent_id", mode="before")
    @classmethod
    def blank_parent_is_root(cls, value):
        return _blank_to_none(value)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    Send ``"parent_id": null`` (or ``""``) explicitly to move the article to
    the root level; omit it to keep the current parent.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    parent_id: str | None = Field(None, max_length=36)

    @field_validator("parent_id", mode="before")
    @classmethod
    def blank_parent_is_root(cls, value):
        return _blank_to_none(value)

    @property
    def parent_id_given(self) -> bool:
        return "parent_id" in self.model_fields_set


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    slug: str
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleSummaryResponse(BaseModel):
    """Compact article reference used for parents, breadcrumbs and pickers."""

    id: str
    title: str
    slug: str

    model_config = {"from_attributes": True}


class ArticleListItemResponse(ArticleResponse):
    """Article index row, with the parent's title for display."""

    parent: ArticleSummaryResponse | None = None


class ArticleNodeResponse(BaseModel):
    """Nested tree node."""

    id: str
    title: str
    slug: str
    parent_id: str | None
    children: list["ArticleNodeResponse"] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class TreeRowResponse(BaseModel):
    """One visible row of the rendered article tree."""

    id: str
    title: str
    slug: str
    parent_id: str | None
    depth: int
    has_children: bool
    expanded: bool
    selected: bool


class ArticleViewResponse(BaseModel):
    """Article page: the article, its parent, breadcrumbs and rendered HTML."""

    article: ArticleResponse
    parent: ArticleSummaryResponse | None
    breadcrumbs: list[ArticleSummaryResponse]
    content_html: str

    model_config = {"from_attributes": True}


class SlugPreviewResponse(BaseModel):
    title: str
    slug: str


class MarkdownPreviewRequest(BaseModel):
    content: str = Field(..., examples=["## Heading\n\nSome **bold** text"])


class MarkdownPreviewResponse(BaseModel):
    html: str
