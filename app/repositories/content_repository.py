"""Content store: CRUD and paginated listings over the contents table."""

from sqlalchemy.orm import Query, Session

from app.models import Content
from app.repositories.pagination import Page, PageRequest, SortDirection

# Wire names accepted for sortBy, mapped to columns.
SORT_COLUMNS = {
    "id": Content.id,
    "title": Content.title,
    "status": Content.status,
    "tags": Content.tags,
    "createdAt": Content.created_at,
    "updatedAt": Content.updated_at,
}
SORTABLE_FIELDS: frozenset[str] = frozenset(SORT_COLUMNS)


class ContentRepository:
    """Narrow persistence capabilities for Content rows, bound to one session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, content_id: int, for_update: bool = False) -> Content | None:
        """Load one row; for_update locks it until the surrounding transaction ends."""
        query = self.db.query(Content).filter(Content.id == content_id)
        if for_update:
            query = query.with_for_update(of=Content)
        return query.first()

    def save(self, content: Content) -> Content:
        self.db.add(content)
        self.db.flush()
        return content

    def delete(self, content: Content) -> None:
        self.db.delete(content)
        self.db.flush()

    def find_all(self, page_request: PageRequest) -> Page[Content]:
        return self._paginate(self.db.query(Content), page_request)

    def find_by_author(
        self, author_id: int, page_request: PageRequest, status: str | None = None
    ) -> Page[Content]:
        query = self.db.query(Content).filter(Content.author_id == author_id)
        if status is not None:
            query = query.filter(Content.status == status)
        return self._paginate(query, page_request)

    def find_by_status(self, status: str, page_request: PageRequest) -> Page[Content]:
        return self._paginate(
            self.db.query(Content).filter(Content.status == status), page_request
        )

    def find_by_title_containing(self, keyword: str, page_request: PageRequest) -> Page[Content]:
        return self._paginate(
            self.db.query(Content).filter(Content.title.contains(keyword, autoescape=True)),
            page_request,
        )

    def _paginate(self, query: Query, page_request: PageRequest) -> Page[Content]:
        total = query.order_by(None).count()
        column = SORT_COLUMNS[page_request.sort_field]
        if page_request.sort_direction is SortDirection.ASC:
            ordering = (column.asc(), Content.id.asc())
        else:
            ordering = (column.desc(), Content.id.desc())
        items = (
            query.order_by(*ordering)
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        return Page(
            items=items,
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )
