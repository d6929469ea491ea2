import unittest

from codehub.core.errors import DuplicateEntityError, EntityNotFoundError, ValidationError
from codehub.entities import Organization, User
from codehub.keys import account_key

from tests.dynamo_case import DynamoTestCase


class TestUserRepository(DynamoTestCase):
    def setUp(self):
        super().setUp()
        self.users = self.factory.users()
        self.organizations = self.factory.organizations()

    def test_create_then_get_round_trips(self):
        result = self.users.create(
            User(username="alice", email="alice@example.com", bio="Hi", payment_plan_id="free")
        )

        self.assertTrue(result.ok)
        fetched = self.users.get("alice")
        self.assertEqual(fetched.username, "alice")
        self.assertEqual(fetched.email, "alice@example.com")
        self.assertEqual(fetched.bio, "Hi")
        self.assertEqual(fetched.payment_plan_id, "free")
        self.assertIsNotNone(fetched.created)
        self.assertEqual(fetched.created, fetched.modified)
        self.assertEqual(result.value, fetched)
        self.assertEqual(self.users.get("alice"), fetched)

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.users.get("nobody"))

    def test_duplicate_is_rejected_and_original_kept(self):
        self.users.create(User(username="alice", email="first@example.com"))

        result = self.users.create(User(username="alice", email="second@example.com"))

        self.assertIsInstance(result, DuplicateEntityError)
        self.assertFalse(result.ok)
        self.assertEqual(result.entity_type, "User")
        self.assertEqual(result.key, {"username": "alice"})
        self.assertEqual(self.users.get("alice").email, "first@example.com")

    def test_account_names_are_shared_with_organizations(self):
        self.users.create(User(username="acme", email="a@example.com"))

        result = self.organizations.create(Organization(org_name="acme"))

        self.assertIsInstance(result, DuplicateEntityError)
        self.assertEqual(result.entity_type, "Organization")
        self.assertIsNone(self.organizations.get("acme"))

    def test_invalid_user_is_not_written(self):
        result = self.users.create(User(username="bad name", email="a@example.com"))

        self.assertIsInstance(result, ValidationError)
        self.assertEqual(result.field, "username")
        self.assertIsNone(self.raw_item(account_key("bad name")))

    def test_update_existing_user(self):
        created = self.users.create(User(username="alice", email="a@example.com", bio="old")).unwrap()

        result = self.users.update(created.with_changes(email="new@example.com", bio=None))

        self.assertTrue(result.ok)
        updated = self.users.get("alice")
        self.assertEqual(updated.email, "new@example.com")
        self.assertIsNone(updated.bio)
        self.assertNotIn("bio", self.raw_item(account_key("alice")))
        self.assertEqual(updated.created, created.created)
        self.assertGreaterEqual(updated.modified, created.modified)

    def test_update_missing_user_is_not_found(self):
        result = self.users.update(User(username="ghost", email="g@example.com"))

        self.assertIsInstance(result, EntityNotFoundError)
        self.assertEqual(result.key, {"username": "ghost"})
        self.assertIsNone(self.raw_item(account_key("ghost")))

    def test_update_never_reports_duplicate(self):
        self.organizations.create(Organization(org_name="acme"))

        result = self.users.update(User(username="acme", email="a@example.com"))

        self.assertIsInstance(result, EntityNotFoundError)
        self.assertIsNotNone(self.organizations.get("acme"))

    def test_delete_is_idempotent(self):
        self.users.create(User(username="alice", email="a@example.com"))

        self.users.delete("alice")
        self.users.delete("alice")
        self.users.delete("never-existed")

        self.assertIsNone(self.users.get("alice"))


class TestOrganizationRepository(DynamoTestCase):
    def setUp(self):
        super().setUp()
        self.organizations = self.factory.organizations()

    def test_create_update_delete(self):
        org = self.organizations.create(Organization(org_name="acme", description="Tools")).unwrap()
        self.assertEqual(self.organizations.get("acme").description, "Tools")

        self.organizations.update(org.with_changes(description="Widgets")).unwrap()
        self.assertEqual(self.organizations.get("acme").description, "Widgets")

        self.organizations.delete("acme")
        self.assertIsNone(self.organizations.get("acme"))

    def test_users_are_not_organizations(self):
        self.factory.users().create(User(username="alice", email="a@example.com"))
        self.assertIsNone(self.organizations.get("alice"))

    def test_name_too_long(self):
        result = self.organizations.create(Organization(org_name="x" * 40))
        self.assertIsInstance(result, ValidationError)
        self.assertEqual(result.field, "org_name")


if __name__ == "__main__":
    unittest.main()
