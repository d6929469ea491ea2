import base64
import json
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from codehub.core.errors import DuplicateEntityError, EntityNotFoundError, ValidationError
from codehub.entities import Organization, Repository, User
from codehub.keys import repository_key

from tests.dynamo_case import DynamoTestCase

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestRepositoryRepository(DynamoTestCase):
    def setUp(self):
        super().setUp()
        self.repositories = self.factory.repositories()
        self.factory.users().create(User(username="alice", email="alice@example.com"))

    def test_create_under_existing_user(self):
        result = self.repositories.create(
            Repository(owner="alice", repo_name="tools", description="CLI", language="Python")
        )

        self.assertTrue(result.ok)
        repository = self.repositories.get("alice", "tools")
        self.assertEqual(repository.description, "CLI")
        self.assertFalse(repository.is_private)
        self.assertEqual(repository.language, "Python")

    def test_create_under_organization(self):
        self.factory.organizations().create(Organization(org_name="acme"))
        self.assertTrue(self.repositories.create(Repository(owner="acme", repo_name="site")).ok)

    def test_missing_owner_leaves_no_trace(self):
        result = self.repositories.create(Repository(owner="ghost", repo_name="tools"))

        self.assertIsInstance(result, EntityNotFoundError)
        self.assertEqual(result.entity_type, "Account")
        self.assertEqual(result.key, {"name": "ghost"})
        self.assertIsNone(self.raw_item(repository_key("ghost", "tools")))

    def test_duplicate(self):
        self.repositories.create(Repository(owner="alice", repo_name="tools", description="first"))

        result = self.repositories.create(Repository(owner="alice", repo_name="tools"))

        self.assertIsInstance(result, DuplicateEntityError)
        self.assertEqual(result.key, {"owner": "alice", "repo_name": "tools"})
        self.assertEqual(self.repositories.get("alice", "tools").description, "first")

    def test_update_keeps_created(self):
        original = self.repositories.create(Repository(owner="alice", repo_name="tools")).unwrap()

        updated = self.repositories.update(original.with_changes(is_private=True)).unwrap()

        self.assertTrue(updated.is_private)
        self.assertEqual(updated.created, original.created)
        item = self.raw_item(repository_key("alice", "tools"))
        self.assertEqual(item["GSI3SK"], item["created"])

    def test_update_does_not_move_repository_in_owner_listing(self):
        original = self.repositories.create(Repository(owner="alice", repo_name="tools")).unwrap()
        stale = original.model_copy(update={"created": START, "description": "moved?"})

        updated = self.repositories.update(stale).unwrap()

        self.assertEqual(updated.description, "moved?")
        self.assertEqual(updated.created, original.created)
        item = self.raw_item(repository_key("alice", "tools"))
        self.assertEqual(item["GSI3SK"], item["created"])

    def test_update_missing_repository(self):
        result = self.repositories.update(Repository(owner="alice", repo_name="nope"))
        self.assertIsInstance(result, EntityNotFoundError)

    def test_delete_is_idempotent(self):
        self.repositories.create(Repository(owner="alice", repo_name="tools"))
        self.repositories.delete("alice", "tools")
        self.repositories.delete("alice", "tools")
        self.assertIsNone(self.repositories.get("alice", "tools"))


class TestListByOwner(DynamoTestCase):
    def setUp(self):
        super().setUp()
        self.repositories = self.factory.repositories()
        self.factory.users().create(User(username="alice", email="alice@example.com"))
        self.factory.users().create(User(username="bob", email="bob@example.com"))

        times = [START + timedelta(minutes=i) for i in range(4)]
        with patch("codehub.repositories.base.utc_now", side_effect=times):
            for name in ("first", "second", "third"):
                self.repositories.create(Repository(owner="alice", repo_name=name)).unwrap()
            self.repositories.create(Repository(owner="bob", repo_name="other")).unwrap()

    def test_newest_first(self):
        page = self.repositories.list_by_owner("alice")

        self.assertEqual([r.repo_name for r in page.items], ["third", "second", "first"])
        self.assertIsNone(page.next_page_token)

    def test_pages_follow_tokens(self):
        first = self.repositories.list_by_owner("alice", limit=2)
        self.assertEqual([r.repo_name for r in first.items], ["third", "second"])
        self.assertIsNotNone(first.next_page_token)

        second = self.repositories.list_by_owner("alice", limit=2, page_token=first.next_page_token)
        self.assertEqual([r.repo_name for r in second.items], ["first"])
        self.assertIsNone(second.next_page_token)

    def test_unknown_owner_is_empty(self):
        page = self.repositories.list_by_owner("nobody")
        self.assertEqual(page.items, [])
        self.assertIsNone(page.next_page_token)

    def test_bad_limit_and_token(self):
        with self.assertRaises(ValidationError) as ctx:
            self.repositories.list_by_owner("alice", limit=0)
        self.assertEqual(ctx.exception.field, "limit")

        with self.assertRaises(ValidationError) as ctx:
            self.repositories.list_by_owner("alice", page_token="%%%not-a-token")
        self.assertEqual(ctx.exception.field, "page_token")

    def test_token_that_is_not_a_start_key(self):
        for payload in ({"foo": "bar"}, {"PK": "REPO#alice#first", "SK": "REPO#alice#first"}):
            token = base64.urlsafe_b64encode(json.dumps(payload).encode()).decode()
            with self.assertRaises(ValidationError) as ctx:
                self.repositories.list_by_owner("alice", page_token=token)
            self.assertEqual(ctx.exception.field, "page_token")


if __name__ == "__main__":
    unittest.main()
