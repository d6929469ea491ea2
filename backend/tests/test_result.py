import unittest

from codehub.core.errors import DuplicateEntityError, EntityNotFoundError, ValidationError
from codehub.core.result import Ok, returns_result


class TestResultVariants(unittest.TestCase):
    def test_ok_unwraps(self):
        result = Ok("value")
        self.assertTrue(result.ok)
        self.assertEqual(result.unwrap(), "value")

    def test_errors_are_failed_variants(self):
        error = EntityNotFoundError("Issue", {"owner": "a", "repo_name": "r", "issue_number": 1})
        self.assertFalse(error.ok)
        with self.assertRaises(EntityNotFoundError):
            error.unwrap()

    def test_error_payloads(self):
        duplicate = DuplicateEntityError("User", {"username": "alice"})
        self.assertEqual(str(duplicate), "User (username='alice') already exists")
        self.assertEqual(
            duplicate.to_dict(),
            {
                "error": "DuplicateEntityError",
                "message": "User (username='alice') already exists",
                "entity_type": "User",
                "key": {"username": "alice"},
            },
        )
        self.assertEqual(ValidationError("title", "Title is required").to_dict()["field"], "title")

    def test_decorator_returns_domain_errors(self):
        @returns_result
        def create(fail_with=None):
            if fail_with:
                raise fail_with
            return 42

        self.assertEqual(create(), Ok(42))
        error = ValidationError("x", "bad")
        self.assertIs(create(error), error)

    def test_decorator_lets_other_errors_propagate(self):
        @returns_result
        def broken():
            raise RuntimeError("store unavailable")

        with self.assertRaises(RuntimeError):
            broken()


if __name__ == "__main__":
    unittest.main()
