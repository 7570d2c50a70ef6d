"""
DynamoDB Account Store - AWS-native account storage.
"""

from typing import Optional, Dict, Any
from datetime import datetime
import logging
from taskboard_auth.ports.account_store_port import AccountStorePort
from taskboard_auth.domain.account import Account, normalize_email
from taskboard_auth.errors import DuplicateEmail, StoreUnavailable

logger = logging.getLogger(__name__)


class DynamoDBAccountStore(AccountStorePort):
    """
    DynamoDB-backed account storage.

    Email is the partition key; creation is a conditional put, so the
    table itself rejects a second account for the same email.
    Requires: pip install boto3
    """

    def __init__(
        self,
        table_name: str = "taskboard-accounts",
        region_name: str = "us-east-1",
        table=None,
    ):
        """
        Initialize DynamoDB account store.

        Args:
            table_name: DynamoDB table name
            region_name: AWS region
            table: Pre-built boto3 Table resource (skips client setup)

        Table schema:
            - Partition key: email (S)
        """
        try:
            import boto3
            from botocore.exceptions import BotoCoreError, ClientError
        except ImportError:
            raise ImportError("boto3 package required: pip install boto3")

        self._client_errors = (BotoCoreError, ClientError)
        self._table_name = table_name
        if table is None:
            dynamodb = boto3.resource("dynamodb", region_name=region_name)
            table = dynamodb.Table(table_name)
        self._table = table

    def find_by_email(self, email: str) -> Optional[Account]:
        """Get an account from DynamoDB."""
        try:
            response = self._table.get_item(
                Key={"email": normalize_email(email)},
                ConsistentRead=True,
            )
        except self._client_errors as e:
            logger.error("DynamoDB get_item on %s failed: %s", self._table_name, e)
            raise StoreUnavailable("DynamoDB lookup failed") from e

        if "Item" not in response:
            return None

        return self._item_to_account(response["Item"])

    def create(self, username: str, email: str, password_hash: str) -> Account:
        """Create an account in DynamoDB with a conditional put."""
        from botocore.exceptions import ClientError

        account = Account.create(username=username, email=email, password_hash=password_hash)

        try:
            self._table.put_item(
                Item=self._account_to_item(account),
                ConditionExpression="attribute_not_exists(email)",
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise DuplicateEmail(f"Email already registered: {account.email}") from e
            logger.error("DynamoDB put_item on %s failed: %s", self._table_name, e)
            raise StoreUnavailable("DynamoDB insert failed") from e
        except self._client_errors as e:
            logger.error("DynamoDB put_item on %s failed: %s", self._table_name, e)
            raise StoreUnavailable("DynamoDB insert failed") from e

        return account

    def _account_to_item(self, account: Account) -> Dict[str, Any]:
        """Convert Account to DynamoDB item."""
        return {
            "email": account.email,
            "account_id": account.account_id,
            "username": account.username,
            "password_hash": account.password_hash,
            "created_at": account.created_at.isoformat(),
        }

    def _item_to_account(self, item: Dict[str, Any]) -> Account:
        """Convert DynamoDB item to Account."""
        return Account(
            account_id=item["account_id"],
            username=item["username"],
            email=item["email"],
            password_hash=item["password_hash"],
            created_at=datetime.fromisoformat(item["created_at"]),
        )
