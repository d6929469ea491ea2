import unittest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from codehub.database.transactions import (
    ConditionalPut,
    ConditionCheck,
    TransactionalWriter,
    cancellation_reasons,
)
from codehub.keys import ItemKey


def cancelled(codes=None, message=None):
    response = {
        "Error": {
            "Code": "TransactionCanceledException",
            "Message": message or "Transaction cancelled, please refer cancellation reasons for specific reasons",
        }
    }
    if codes is not None:
        response["CancellationReasons"] = [{"Code": code} for code in codes]
    return ClientError(response, "TransactWriteItems")


class TestTransactionalWriter(unittest.TestCase):
    def setUp(self):
        self.table = MagicMock()
        self.table.name = "TestTable"
        self.client = self.table.meta.client
        self.writer = TransactionalWriter(self.table)
        self.ops = [
            ConditionalPut({"PK": "REPO#o#r", "SK": "REPO#o#r"}),
            ConditionCheck(ItemKey("ACCOUNT#o", "ACCOUNT#o")),
        ]

    def test_builds_put_and_check_in_order(self):
        outcome = self.writer.execute(self.ops)

        self.assertTrue(outcome.succeeded)
        items = self.client.transact_write_items.call_args.kwargs["TransactItems"]
        self.assertEqual(items[0]["Put"]["TableName"], "TestTable")
        self.assertEqual(items[0]["Put"]["ConditionExpression"], "attribute_not_exists(PK)")
        self.assertEqual(
            items[1]["ConditionCheck"]["Key"], {"PK": "ACCOUNT#o", "SK": "ACCOUNT#o"}
        )
        self.assertEqual(items[1]["ConditionCheck"]["ConditionExpression"], "attribute_exists(PK)")

    def test_cancellation_reports_reasons_by_position(self):
        self.client.transact_write_items.side_effect = cancelled(["None", "ConditionalCheckFailed"])

        outcome = self.writer.execute(self.ops)

        self.assertFalse(outcome.succeeded)
        self.assertEqual(outcome.reasons, ("None", "ConditionalCheckFailed"))
        self.assertFalse(outcome.condition_failed(0))
        self.assertTrue(outcome.condition_failed(1))
        self.assertEqual(outcome.first_failed_index, 1)

    def test_other_client_errors_propagate(self):
        error = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
            "TransactWriteItems",
        )
        self.client.transact_write_items.side_effect = error

        with self.assertRaises(ClientError) as ctx:
            self.writer.execute(self.ops)
        self.assertIs(ctx.exception, error)

    def test_reason_count_mismatch_propagates(self):
        self.client.transact_write_items.side_effect = cancelled(["ConditionalCheckFailed"])

        with self.assertRaises(ClientError):
            self.writer.execute(self.ops)

    def test_rejects_empty_transactions(self):
        with self.assertRaises(ValueError):
            self.writer.execute([])
        self.client.transact_write_items.assert_not_called()


class TestCancellationReasons(unittest.TestCase):
    def test_prefers_structured_reasons(self):
        error = cancelled(["ConditionalCheckFailed", None, "None"], message="ignored [Foo]")
        self.assertEqual(cancellation_reasons(error), ("ConditionalCheckFailed", "None", "None"))

    def test_falls_back_to_message(self):
        error = cancelled(
            message=(
                "Transaction cancelled, please refer cancellation reasons for specific "
                "reasons [None, None, ConditionalCheckFailed]"
            )
        )
        self.assertEqual(cancellation_reasons(error), ("None", "None", "ConditionalCheckFailed"))

    def test_no_reasons_available(self):
        self.assertEqual(cancellation_reasons(cancelled(message="Transaction cancelled")), ())


if __name__ == "__main__":
    unittest.main()
