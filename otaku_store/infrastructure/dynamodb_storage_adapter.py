"""DynamoDB implementation of the Persistence Adapter."""

import logging
from typing import Any, Dict, Optional

import boto3

from ..domain.interfaces.persistence_adapter import PersistenceAdapter

logger = logging.getLogger(__name__)


class DynamoDBStorageAdapter(PersistenceAdapter):
    """DynamoDB implementation of the Persistence Adapter protocol.

    Each storage key is one item ``{"id": key, "value": <string>}``.
    Writes are plain ``put_item`` calls without conditions, so this backend
    gives the same last-writer-wins semantics as browser local storage.
    """

    def __init__(self, table_name: str, region_name: str = "us-east-1"):
        """Initialize the DynamoDB storage adapter.

        Args:
            table_name: The name of the DynamoDB table.
            region_name: AWS region name (default: us-east-1).
        """
        self.table_name = table_name
        self.dynamodb = boto3.resource("dynamodb", region_name=region_name)
        self.table = self.dynamodb.Table(table_name)

    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key from DynamoDB.

        Args:
            key: The storage key.

        Returns:
            Optional[str]: The stored string, or None if the item is absent.
        """
        response = self.table.get_item(Key={"id": key})

        if "Item" not in response:
            return None

        return self._item_to_value(response["Item"])

    def set(self, key: str, value: str) -> None:
        """Store a string under a key in DynamoDB.

        Args:
            key: The storage key.
            value: The string to store.
        """
        self.table.put_item(Item={"id": key, "value": value})
        logger.debug(f"Stored {len(value)} characters under key {key} in {self.table_name}")

    def remove(self, key: str) -> None:
        """Delete the item for a key. Deleting an absent item is a no-op in DynamoDB."""
        self.table.delete_item(Key={"id": key})

    def _item_to_value(self, item: Dict[str, Any]) -> Optional[str]:
        """Extract the stored string from a DynamoDB item.

        Args:
            item: The DynamoDB item.

        Returns:
            Optional[str]: The stored string, or None if the item has no value.
        """
        value = item.get("value")
        if value is None:
            return None
        return str(value)
