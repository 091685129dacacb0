"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

# Singleton instance
_dynamo_instance = None

PROFILE_SK = "PROFILE"
SYMPTOM_PREFIX = "SYMPTOM#"
MOOD_PREFIX = "MOOD#"
PERIOD_PREFIX = "PERIOD#"

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    The client is created once per process so warm Lambda invocations reuse
    the same connection pool.

    Example:
        dynamo = get_dynamo()
        item = dynamo.get_item({"PK": "USER#123", "SK": "PROFILE"})

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        EnvironmentError: If TRACKER_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['TRACKER_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "TRACKER_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        return response.get('Item')

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_prefix: Optional[str] = None,
        newest_first: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Query items using partition key and optional sort key prefix.

        Follows LastEvaluatedKey so callers always get the full result set.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_prefix: Optional prefix the sort key must begin with
            newest_first: Return items in descending sort key order

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_prefix:
            key_condition = key_condition & Key("SK").begins_with(sort_key_prefix)

        query_kwargs = {
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": not newest_first
        }
        items: List[Dict[str, Any]] = []
        while True:
            response = self.table.query(**query_kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            query_kwargs["ExclusiveStartKey"] = last_key

    def delete_item(self, key: Dict[str, str]) -> Dict[str, Any]:
        """
        Delete an item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Response from DynamoDB
        """
        return self.table.delete_item(Key=key)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_symptom_sk(date_str: str, entry_id: str) -> str:
    """
    Create sort key for symptom entries.

    The date comes first so a prefix query returns entries in date order.

    Args:
        date_str: ISO format date string of the entry
        entry_id: Unique entry identifier

    Returns:
        Sort key in format "SYMPTOM#{date_str}#{entry_id}"
    """
    return f"{SYMPTOM_PREFIX}{date_str}#{entry_id}"

def create_mood_sk(date_str: str, entry_id: str) -> str:
    """Create sort key for mood entries."""
    return f"{MOOD_PREFIX}{date_str}#{entry_id}"

def create_period_sk(start_date_str: str) -> str:
    """Create sort key for recorded periods."""
    return f"{PERIOD_PREFIX}{start_date_str}"
