import unittest
import uuid

from codehub.core.errors import EntityNotFoundError, ValidationError
from codehub.entities import Issue, IssueComment, PRComment, PullRequest, Repository, User

from tests.dynamo_case import DynamoTestCase


class CommentTestCase(DynamoTestCase):
    def setUp(self):
        super().setUp()
        self.factory.users().create(User(username="alice", email="alice@example.com"))
        self.factory.repositories().create(Repository(owner="alice", repo_name="tools"))
        self.factory.issues().create(
            Issue(owner="alice", repo_name="tools", title="Bug", author="alice")
        ).unwrap()
        self.factory.pull_requests().create(
            PullRequest(
                owner="alice",
                repo_name="tools",
                title="Fix",
                author="alice",
                source_branch="fix",
                target_branch="main",
            )
        ).unwrap()


class TestIssueCommentRepository(CommentTestCase):
    def setUp(self):
        super().setUp()
        self.comments = self.factory.issue_comments()

    def comment(self, issue_number=1, body="Looks good"):
        return IssueComment(
            owner="alice", repo_name="tools", issue_number=issue_number, body=body, author="bob"
        )

    def test_create_generates_id(self):
        created = self.comments.create(self.comment()).unwrap()

        self.assertEqual(str(uuid.UUID(created.comment_id)), created.comment_id)
        fetched = self.comments.get("alice", "tools", 1, created.comment_id)
        self.assertEqual(fetched.body, "Looks good")
        self.assertEqual(fetched.author, "bob")

    def test_each_create_gets_a_new_id(self):
        first = self.comments.create(self.comment()).unwrap()
        second = self.comments.create(self.comment()).unwrap()
        self.assertNotEqual(first.comment_id, second.comment_id)

    def test_missing_issue(self):
        result = self.comments.create(self.comment(issue_number=7))

        self.assertIsInstance(result, EntityNotFoundError)
        self.assertEqual(result.entity_type, "Issue")
        self.assertEqual(self.comments.list_by_issue("alice", "tools", 7), [])

    def test_comment_on_pull_request_number_is_not_an_issue_comment(self):
        result = self.comments.create(self.comment(issue_number=2))
        self.assertIsInstance(result, EntityNotFoundError)

    def test_blank_body(self):
        result = self.comments.create(self.comment(body="   "))
        self.assertIsInstance(result, ValidationError)
        self.assertEqual(result.field, "body")

    def test_list_update_delete(self):
        first = self.comments.create(self.comment(body="one")).unwrap()
        self.comments.create(self.comment(body="two")).unwrap()

        self.assertEqual(
            sorted(c.body for c in self.comments.list_by_issue("alice", "tools", 1)), ["one", "two"]
        )

        self.comments.update(first.with_changes(body="edited")).unwrap()
        self.assertEqual(self.comments.get("alice", "tools", 1, first.comment_id).body, "edited")

        self.comments.delete("alice", "tools", 1, first.comment_id)
        self.comments.delete("alice", "tools", 1, first.comment_id)
        self.assertEqual(
            [c.body for c in self.comments.list_by_issue("alice", "tools", 1)], ["two"]
        )


class TestPRCommentRepository(CommentTestCase):
    def setUp(self):
        super().setUp()
        self.comments = self.factory.pr_comments()

    def comment(self, pr_number=2):
        return PRComment(owner="alice", repo_name="tools", pr_number=pr_number, body="LGTM", author="bob")

    def test_create_get_list(self):
        created = self.comments.create(self.comment()).unwrap()

        self.assertIsNotNone(created.comment_id)
        self.assertEqual(self.comments.get("alice", "tools", 2, created.comment_id), created)
        self.assertEqual(self.comments.list_by_pr("alice", "tools", 2), [created])

    def test_missing_pull_request(self):
        result = self.comments.create(self.comment(pr_number=1))

        self.assertIsInstance(result, EntityNotFoundError)
        self.assertEqual(result.entity_type, "PullRequest")

    def test_update_missing_comment(self):
        result = self.comments.update(
            PRComment(
                owner="alice",
                repo_name="tools",
                pr_number=2,
                comment_id="missing",
                body="x",
                author="bob",
            )
        )
        self.assertIsInstance(result, EntityNotFoundError)


if __name__ == "__main__":
    unittest.main()
