"""Content endpoints: create, update, delete, fetch, list and search."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import CurrentUser, get_content_service
from app.core.errors import unwrap
from app.models import Content
from app.repositories.content_repository import SORTABLE_FIELDS
from app.repositories.pagination import (
    DEFAULT_PAGE,
    DEFAULT_SIZE,
    DEFAULT_SORT_FIELD,
    Page,
    PageRequest,
    SortDirection,
)
from app.schemas.common import MessageResponse, PageResponse
from app.schemas.content import ContentRequest, ContentResponse
from app.services.content_service import ContentService

router = APIRouter()

DELETED_MESSAGE = "Content deleted successfully"

Service = Annotated[ContentService, Depends(get_content_service)]


def page_request(
    page: Annotated[int, Query(description="Zero-based page index")] = DEFAULT_PAGE,
    size: Annotated[int, Query(description="Page size (1-100)")] = DEFAULT_SIZE,
    sort_by: Annotated[
        str, Query(alias="sortBy", description="Field to sort by")
    ] = DEFAULT_SORT_FIELD,
    sort_direction: Annotated[
        str, Query(alias="sortDirection", description="ASC or DESC")
    ] = SortDirection.DESC.value,
) -> PageRequest:
    """Parse the pagination query parameters shared by every listing."""
    return unwrap(PageRequest.parse(page, size, sort_by, sort_direction, SORTABLE_FIELDS))


Pagination = Annotated[PageRequest, Depends(page_request)]


def _to_page_response(page: Page[Content]) -> PageResponse[ContentResponse]:
    return PageResponse[ContentResponse](
        items=[ContentResponse.from_model(c) for c in page.items],
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        page=page.page,
        size=page.size,
    )


@router.post(
    "",
    response_model=ContentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new content",
)
def create_content(
    body: ContentRequest, author: CurrentUser, service: Service
) -> ContentResponse:
    """Create a content item authored by the caller. status defaults to DRAFT."""
    return ContentResponse.from_model(service.create(body, author))


@router.get("", response_model=PageResponse[ContentResponse], summary="Get all contents")
def list_contents(pagination: Pagination, service: Service) -> PageResponse[ContentResponse]:
    return _to_page_response(service.list_all(pagination))


@router.get("/my", response_model=PageResponse[ContentResponse], summary="Get my contents")
def list_my_contents(
    author: CurrentUser,
    pagination: Pagination,
    service: Service,
    status_filter: Annotated[
        str | None, Query(alias="status", description="Only items with this status")
    ] = None,
) -> PageResponse[ContentResponse]:
    """Contents authored by the caller, optionally filtered by status."""
    return _to_page_response(service.list_by_author(author, pagination, status=status_filter))


@router.get(
    "/status/{content_status}",
    response_model=PageResponse[ContentResponse],
    summary="Get contents by status",
)
def list_contents_by_status(
    content_status: str, pagination: Pagination, service: Service
) -> PageResponse[ContentResponse]:
    return _to_page_response(service.list_by_status(content_status, pagination))


@router.get(
    "/search",
    response_model=PageResponse[ContentResponse],
    summary="Search contents",
)
def search_contents(
    keyword: Annotated[str, Query(min_length=1, description="Substring of the title")],
    pagination: Pagination,
    service: Service,
) -> PageResponse[ContentResponse]:
    """Contents whose title contains keyword."""
    return _to_page_response(service.search_by_title(keyword, pagination))


@router.get(
    "/{content_id}",
    response_model=ContentResponse,
    summary="Get content by ID",
    responses={404: {"model": MessageResponse}},
)
def get_content(content_id: int, service: Service) -> ContentResponse:
    return ContentResponse.from_model(unwrap(service.get_by_id(content_id)))


@router.put(
    "/{content_id}",
    response_model=ContentResponse,
    summary="Update content",
    responses={403: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def update_content(
    content_id: int, body: ContentRequest, actor: CurrentUser, service: Service
) -> ContentResponse:
    """Replace title, body, status and tags. Only the author may update."""
    return ContentResponse.from_model(unwrap(service.update(content_id, body, actor)))


@router.delete(
    "/{content_id}",
    response_model=MessageResponse,
    summary="Delete content",
    responses={403: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def delete_content(content_id: int, actor: CurrentUser, service: Service) -> MessageResponse:
    """Delete a content item. Only the author may delete."""
    unwrap(service.delete(content_id, actor))
    return MessageResponse(message=DELETED_MESSAGE)
