"""Tests for app.services.content_service: ownership guard and paginated listings (SQLite)."""

import unittest

from app.core.database import SessionLocal, engine
from app.core.errors import Err, ErrorKind, Ok
from app.models import Base, Content, User
from app.repositories.pagination import PageRequest, SortDirection
from app.schemas.content import ContentRequest
from app.services.content_service import ContentService


def _request(title: str = "Hello", body: str = "world", **kwargs: object) -> ContentRequest:
    return ContentRequest(title=title, body=body, **kwargs)


class ContentServiceTestCase(unittest.TestCase):
    """Fresh schema with two users per test."""

    def setUp(self) -> None:
        Base.metadata.create_all(bind=engine)
        self.db = SessionLocal()
        self.alice = User(username="alice", email="a@x.io", password="hash-a", role="ROLE_USER")
        self.bob = User(username="bob", email="b@x.io", password="hash-b", role="ROLE_USER")
        self.db.add_all([self.alice, self.bob])
        self.db.commit()
        self.service = ContentService(self.db)

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(bind=engine)


class TestCreate(ContentServiceTestCase):
    def test_create_defaults_status_to_draft(self) -> None:
        content = self.service.create(_request(), self.alice)
        self.assertIsNotNone(content.id)
        self.assertEqual(content.status, "DRAFT")
        self.assertEqual(content.author_id, self.alice.id)
        self.assertEqual(content.author.username, "alice")
        self.assertIsNotNone(content.created_at)
        self.assertIsNotNone(content.updated_at)

    def test_create_keeps_status_and_tags(self) -> None:
        content = self.service.create(_request(status="PUBLISHED", tags="a,b"), self.alice)
        self.assertEqual(content.status, "PUBLISHED")
        self.assertEqual(content.tags, "a,b")


class TestUpdateGuard(ContentServiceTestCase):
    """Only the author may update; missing rows are NotFound."""

    def test_author_can_update(self) -> None:
        content = self.service.create(_request(), self.alice)
        result = self.service.update(
            content.id, _request(title="New", body="text", status="PUBLISHED"), self.alice
        )
        self.assertIsInstance(result, Ok)
        self.assertEqual(result.value.title, "New")
        self.assertEqual(result.value.status, "PUBLISHED")
        self.assertEqual(result.value.author_id, self.alice.id)

    def test_update_without_status_resets_to_draft(self) -> None:
        content = self.service.create(_request(status="PUBLISHED"), self.alice)
        result = self.service.update(content.id, _request(), self.alice)
        self.assertEqual(result.value.status, "DRAFT")

    def test_other_user_is_forbidden_and_content_unchanged(self) -> None:
        content = self.service.create(_request(title="Original"), self.alice)
        result = self.service.update(content.id, _request(title="Hijacked"), self.bob)
        self.assertIsInstance(result, Err)
        self.assertEqual(result.kind, ErrorKind.FORBIDDEN)
        self.assertEqual(result.message, "You are not authorized to update this content")
        self.db.expire_all()
        reloaded = self.db.get(Content, content.id)
        self.assertEqual(reloaded.title, "Original")
        self.assertEqual(reloaded.author_id, self.alice.id)

    def test_missing_content_is_not_found(self) -> None:
        result = self.service.update(999, _request(), self.bob)
        self.assertIsInstance(result, Err)
        self.assertEqual(result.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(result.message, "Content not found with id: 999")


class TestDeleteGuard(ContentServiceTestCase):
    def test_author_can_delete(self) -> None:
        content = self.service.create(_request(), self.alice)
        self.assertIsInstance(self.service.delete(content.id, self.alice), Ok)
        self.assertEqual(self.service.get_by_id(content.id).kind, ErrorKind.NOT_FOUND)

    def test_other_user_cannot_delete(self) -> None:
        content = self.service.create(_request(), self.alice)
        result = self.service.delete(content.id, self.bob)
        self.assertEqual(result.kind, ErrorKind.FORBIDDEN)
        self.assertEqual(result.message, "You are not authorized to delete this content")
        self.assertIsInstance(self.service.get_by_id(content.id), Ok)

    def test_delete_missing(self) -> None:
        self.assertEqual(self.service.delete(12345, self.alice).kind, ErrorKind.NOT_FOUND)


class TestListings(ContentServiceTestCase):
    """Reads are unguarded and pages partition the result set."""

    def test_pages_partition_results(self) -> None:
        created = {self.service.create(_request(title=f"Draft {i}"), self.alice).id for i in range(15)}
        self.service.create(_request(title="Bob's"), self.bob)

        seen: list[int] = []
        for page_index in range(2):
            page = self.service.list_by_author(self.alice, PageRequest(page=page_index, size=10))
            self.assertEqual(page.total_elements, 15)
            self.assertEqual(page.total_pages, 2)
            seen.extend(c.id for c in page.items)
        self.assertEqual(len(seen), 15)
        self.assertEqual(set(seen), created)

        last = self.service.list_by_author(self.alice, PageRequest(page=1, size=10))
        self.assertEqual(len(last.items), 5)

    def test_page_past_end_is_empty(self) -> None:
        self.service.create(_request(), self.alice)
        page = self.service.list_all(PageRequest(page=5, size=10))
        self.assertEqual(page.items, [])
        self.assertEqual(page.total_elements, 1)

    def test_list_all_includes_every_author(self) -> None:
        self.service.create(_request(), self.alice)
        self.service.create(_request(), self.bob)
        self.assertEqual(self.service.list_all(PageRequest()).total_elements, 2)

    def test_sort_by_title_ascending(self) -> None:
        for title in ("beta", "alpha", "gamma"):
            self.service.create(_request(title=title), self.alice)
        page = self.service.list_all(
            PageRequest(sort_field="title", sort_direction=SortDirection.ASC)
        )
        self.assertEqual([c.title for c in page.items], ["alpha", "beta", "gamma"])

    def test_list_by_status(self) -> None:
        self.service.create(_request(status="PUBLISHED"), self.alice)
        self.service.create(_request(), self.bob)
        page = self.service.list_by_status("PUBLISHED", PageRequest())
        self.assertEqual([c.status for c in page.items], ["PUBLISHED"])

    def test_list_by_author_with_status(self) -> None:
        self.service.create(_request(status="PUBLISHED"), self.alice)
        self.service.create(_request(), self.alice)
        page = self.service.list_by_author(self.alice, PageRequest(), status="DRAFT")
        self.assertEqual(page.total_elements, 1)

    def test_search_by_title_substring(self) -> None:
        self.service.create(_request(title="Release notes"), self.alice)
        self.service.create(_request(title="Meeting notes"), self.bob)
        self.service.create(_request(title="Roadmap"), self.bob)
        page = self.service.search_by_title("notes", PageRequest())
        self.assertEqual(page.total_elements, 2)

    def test_search_escapes_like_wildcards(self) -> None:
        self.service.create(_request(title="100% done"), self.alice)
        self.service.create(_request(title="1000 done"), self.alice)
        page = self.service.search_by_title("0%", PageRequest())
        self.assertEqual([c.title for c in page.items], ["100% done"])


if __name__ == "__main__":
    unittest.main()
