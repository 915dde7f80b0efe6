"""Article CRUD, tree and preview endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ArticleCreate,
    ArticleListItemResponse,
    ArticleNodeResponse,
    ArticleResponse,
    ArticleSummaryResponse,
    ArticleUpdate,
    ArticleViewResponse,
    MarkdownPreviewRequest,
    MarkdownPreviewResponse,
    SlugPreviewResponse,
    TreeRowResponse,
)
from app.application.schemas.article import TreeOrder
from app.application.services import ArticleService
from app.domain.exceptions import (
    DanglingParentError,
    DuplicateSlugError,
    EntityNotFoundError,
    HasChildrenError,
    InvalidParentError,
    ValidationError,
)
from app.domain.slug import derive_slug
from app.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

_ERROR_STATUS: dict[type[Exception], int] = {
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateSlugError: status.HTTP_409_CONFLICT,
    HasChildrenError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DanglingParentError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidParentError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}
_DOMAIN_ERRORS = tuple(_ERROR_STATUS)


def _http_error(exc: Exception) -> HTTPException:
    """Map a domain exception to the HTTP error shown to the user."""
    return HTTPException(status_code=_ERROR_STATUS[type(exc)], detail=str(exc))


@router.get("", response_model=list[ArticleListItemResponse])
async def list_articles(
    search: str | None = Query(None, description="Filter by article or parent title"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleListItemResponse]:
    """Retrieve all articles, newest first, with their parent."""
    listings = await service.list_articles(search=search)
    return [
        ArticleListItemResponse(
            **ArticleResponse.model_validate(item.article, from_attributes=True).model_dump(),
            parent=(
                ArticleSummaryResponse.model_validate(item.parent, from_attributes=True)
                if item.parent
                else None
            ),
        )
        for item in listings
    ]


@router.get("/tree", response_model=list[ArticleNodeResponse])
async def get_tree(
    order: TreeOrder = Query("created", description="Sibling order: creation time or title"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleNodeResponse]:
    """Retrieve the article hierarchy as a nested forest."""
    forest = await service.get_forest(order=order)
    return [ArticleNodeResponse.model_validate(node, from_attributes=True) for node in forest]


@router.get("/tree/view", response_model=list[TreeRowResponse])
async def get_tree_view(
    collapsed: list[str] | None = Query(None, description="IDs of collapsed nodes"),
    selected: str | None = Query(None, description="ID of the selected node"),
    order: TreeOrder = Query("created"),
    service: ArticleService = Depends(get_article_service),
) -> list[TreeRowResponse]:
    """Retrieve the visible rows of the tree for the given collapse/selection state."""
    rows = await service.get_tree_view(collapsed=collapsed, selected_id=selected, order=order)
    return [
        TreeRowResponse(
            id=row.node.id,
            title=row.node.title,
            slug=row.node.slug,
            parent_id=row.node.parent_id,
            depth=row.depth,
            has_children=row.node.has_children,
            expanded=row.expanded,
            selected=row.selected,
        )
        for row in rows
    ]


@router.get("/slug-preview", response_model=SlugPreviewResponse)
async def preview_slug(title: str = Query(..., description="Article title")) -> SlugPreviewResponse:
    """Derive the slug a title would get."""
    return SlugPreviewResponse(title=title, slug=derive_slug(title))


@router.post("/preview", response_model=MarkdownPreviewResponse)
async def preview_markdown(
    data: MarkdownPreviewRequest,
    service: ArticleService = Depends(get_article_service),
) -> MarkdownPreviewResponse:
    """Render Markdown content without saving it."""
    return MarkdownPreviewResponse(html=service.render_preview(data.content))


@router.get("/parent-options", response_model=list[ArticleSummaryResponse])
async def list_parent_options(
    exclude: str | None = Query(None, description="Article being edited; it and its descendants are excluded"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleSummaryResponse]:
    """Articles that can be chosen as a parent, ordered by title."""
    try:
        options = await service.list_parent_options(article_id=exclude)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
    return [ArticleSummaryResponse.model_validate(a, from_attributes=True) for a in options]


@router.get("/by-slug/{slug}", response_model=ArticleResponse)
async def get_article_by_slug(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by slug."""
    try:
        article = await service.get_article_by_slug(slug)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}/view", response_model=ArticleViewResponse)
async def view_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleViewResponse:
    """Retrieve an article with breadcrumbs and rendered HTML content."""
    try:
        view = await service.get_article_view(article_id)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
    return ArticleViewResponse.model_validate(view, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    try:
        article = await service.create_article(data)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article."""
    try:
        article = await service.update_article(article_id, data)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID. Articles with children cannot be deleted."""
    try:
        await service.delete_article(article_id)
    except _DOMAIN_ERRORS as e:
        raise _http_error(e)
