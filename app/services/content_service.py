"""Content operations with the ownership guard on mutations."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import Ok, Result, forbidden, not_found
from app.models import Content, User
from app.models.content import DEFAULT_STATUS
from app.repositories.content_repository import ContentRepository
from app.repositories.pagination import Page, PageRequest
from app.schemas.content import ContentRequest

logger = logging.getLogger(__name__)


class ContentService:
    """
    CRUD and listings over content, bound to one request's session.

    Reads are open to any authenticated user. update and delete load the row
    with a lock, check that the actor is the author, and write in the same
    transaction; a missing row is reported as NotFound before ownership is
    considered.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.contents = ContentRepository(db)

    def create(self, request: ContentRequest, author: User) -> Content:
        content = Content(
            title=request.title,
            body=request.body,
            status=request.status or DEFAULT_STATUS,
            tags=request.tags,
            author=author,
        )
        self.contents.save(content)
        self.db.commit()
        self.db.refresh(content)
        logger.info("Content id=%s created by user id=%s", content.id, author.id)
        return content

    def update(self, content_id: int, request: ContentRequest, actor: User) -> Result[Content]:
        content = self.contents.find_by_id(content_id, for_update=True)
        if content is None:
            return not_found("Content", content_id)
        if content.author_id != actor.id:
            logger.warning(
                "User id=%s refused update of content id=%s owned by user id=%s",
                actor.id,
                content_id,
                content.author_id,
            )
            return forbidden("update", "content")

        content.title = request.title
        content.body = request.body
        content.status = request.status or DEFAULT_STATUS
        content.tags = request.tags
        self.contents.save(content)
        self.db.commit()
        self.db.refresh(content)
        return Ok(content)

    def delete(self, content_id: int, actor: User) -> Result[None]:
        content = self.contents.find_by_id(content_id, for_update=True)
        if content is None:
            return not_found("Content", content_id)
        if content.author_id != actor.id:
            logger.warning(
                "User id=%s refused delete of content id=%s owned by user id=%s",
                actor.id,
                content_id,
                content.author_id,
            )
            return forbidden("delete", "content")

        self.contents.delete(content)
        self.db.commit()
        logger.info("Content id=%s deleted by user id=%s", content_id, actor.id)
        return Ok(None)

    def get_by_id(self, content_id: int) -> Result[Content]:
        content = self.contents.find_by_id(content_id)
        if content is None:
            return not_found("Content", content_id)
        return Ok(content)

    def list_all(self, page_request: PageRequest) -> Page[Content]:
        return self.contents.find_all(page_request)

    def list_by_author(
        self, author: User, page_request: PageRequest, status: str | None = None
    ) -> Page[Content]:
        return self.contents.find_by_author(author.id, page_request, status=status)

    def list_by_status(self, status: str, page_request: PageRequest) -> Page[Content]:
        return self.contents.find_by_status(status, page_request)

    def search_by_title(self, keyword: str, page_request: PageRequest) -> Page[Content]:
        return self.contents.find_by_title_containing(keyword, page_request)
