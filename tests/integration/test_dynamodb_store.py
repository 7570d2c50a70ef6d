"""
Integration tests for DynamoDB account store.

Uses an in-process table double that mimics the conditional-put semantics
of a real table. Tests against AWS are skipped by default.
"""

import pytest

boto3 = pytest.importorskip("boto3")
from botocore.exceptions import ClientError, EndpointConnectionError

from taskboard_auth.adapters import DynamoDBAccountStore
from taskboard_auth.errors import DuplicateEmail, StoreUnavailable


class FakeTable:
    """Minimal boto3 Table stand-in keyed on email."""

    def __init__(self):
        self.items = {}

    def get_item(self, Key, ConsistentRead=False):
        item = self.items.get(Key["email"])
        return {"Item": dict(item)} if item else {}

    def put_item(self, Item, ConditionExpression=None):
        if ConditionExpression == "attribute_not_exists(email)" and Item["email"] in self.items:
            raise ClientError(
                {"Error": {"Code": "ConditionalCheckFailedException", "Message": "exists"}},
                "PutItem",
            )
        self.items[Item["email"]] = dict(Item)
        return {}


class UnreachableTable:
    """Table whose endpoint cannot be reached."""

    def get_item(self, **kwargs):
        raise EndpointConnectionError(endpoint_url="https://dynamodb.invalid")

    def put_item(self, **kwargs):
        raise ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
            "PutItem",
        )


class TestDynamoDBAccountStore:
    """Test DynamoDB account storage."""

    def setup_method(self):
        """Set up test fixtures."""
        self.table = FakeTable()
        self.store = DynamoDBAccountStore(table=self.table)

    def test_create_and_find(self):
        """Test account round trip through the table."""
        created = self.store.create("ann", "A@x.com", "hash")

        assert "a@x.com" in self.table.items
        found = self.store.find_by_email("a@x.com")
        assert found == created

    def test_find_missing(self):
        """Test lookup of an unknown email."""
        assert self.store.find_by_email("nobody@x.com") is None

    def test_duplicate_email(self):
        """Test the conditional put rejects a second account."""
        self.store.create("ann", "a@x.com", "hash")

        with pytest.raises(DuplicateEmail):
            self.store.create("bob", "a@x.com", "other")

        assert self.store.find_by_email("a@x.com").username == "ann"

    def test_backend_errors(self):
        """Test AWS errors become StoreUnavailable."""
        store = DynamoDBAccountStore(table=UnreachableTable())

        with pytest.raises(StoreUnavailable):
            store.find_by_email("a@x.com")

        with pytest.raises(StoreUnavailable):
            store.create("ann", "a@x.com", "hash")


@pytest.mark.skip(reason="Requires AWS credentials and a provisioned table")
class TestDynamoDBAccountStoreLive:
    """Test against a real DynamoDB table."""

    def test_create_and_find(self):
        store = DynamoDBAccountStore(table_name="taskboard-accounts-test")
        account = store.create("ann", "live@x.com", "hash")
        assert store.find_by_email("live@x.com").account_id == account.account_id
