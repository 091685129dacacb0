"""
Tests for the DynamoDB client wrapper.
"""
from unittest.mock import Mock, patch

import pytest

from src.utils import dynamo
from src.utils.dynamo import (
    DynamoDBClient,
    create_pk,
    create_symptom_sk,
    create_mood_sk,
    create_period_sk
)


@pytest.fixture
def table():
    """Create DynamoDBClient with a mocked boto3 table."""
    with patch('src.utils.dynamo.boto3') as mock_boto3:
        mock_table = Mock()
        mock_boto3.resource.return_value.Table.return_value = mock_table
        yield DynamoDBClient("tracker"), mock_table


def test_key_builders():
    assert create_pk("42") == "USER#42"
    assert create_symptom_sk("2024-01-20", "abc") == "SYMPTOM#2024-01-20#abc"
    assert create_mood_sk("2024-01-20", "abc") == "MOOD#2024-01-20#abc"
    assert create_period_sk("2024-01-01") == "PERIOD#2024-01-01"


def test_get_item(table):
    client, mock_table = table
    mock_table.get_item.return_value = {"Item": {"PK": "USER#1", "SK": "PROFILE"}}

    assert client.get_item({"PK": "USER#1", "SK": "PROFILE"}) == {"PK": "USER#1", "SK": "PROFILE"}
    mock_table.get_item.assert_called_once_with(Key={"PK": "USER#1", "SK": "PROFILE"})


def test_get_item_missing(table):
    client, mock_table = table
    mock_table.get_item.return_value = {}

    assert client.get_item({"PK": "USER#1", "SK": "PROFILE"}) is None


def test_query_items_follows_pagination(table):
    """Test every page is read until LastEvaluatedKey is absent."""
    client, mock_table = table
    mock_table.query.side_effect = [
        {"Items": [{"SK": "SYMPTOM#2"}], "LastEvaluatedKey": {"PK": "USER#1", "SK": "SYMPTOM#2"}},
        {"Items": [{"SK": "SYMPTOM#1"}]}
    ]

    items = client.query_items("PK", "USER#1", sort_key_prefix="SYMPTOM#", newest_first=True)

    assert items == [{"SK": "SYMPTOM#2"}, {"SK": "SYMPTOM#1"}]
    assert mock_table.query.call_count == 2
    first_call, second_call = mock_table.query.call_args_list
    assert first_call.kwargs["ScanIndexForward"] is False
    assert "ExclusiveStartKey" not in first_call.kwargs
    assert second_call.kwargs["ExclusiveStartKey"] == {"PK": "USER#1", "SK": "SYMPTOM#2"}


def test_query_items_oldest_first(table):
    client, mock_table = table
    mock_table.query.return_value = {"Items": []}

    assert client.query_items("PK", "USER#1") == []
    assert mock_table.query.call_args.kwargs["ScanIndexForward"] is True


def test_delete_item(table):
    client, mock_table = table

    client.delete_item({"PK": "USER#1", "SK": "MOOD#2024-01-01#a"})

    mock_table.delete_item.assert_called_once_with(Key={"PK": "USER#1", "SK": "MOOD#2024-01-01#a"})


def test_get_dynamo_requires_table_name(monkeypatch):
    monkeypatch.setattr(dynamo, "_dynamo_instance", None)
    monkeypatch.delenv("TRACKER_TABLE_NAME", raising=False)

    with pytest.raises(EnvironmentError):
        dynamo.get_dynamo()


def test_get_dynamo_is_singleton(monkeypatch):
    monkeypatch.setattr(dynamo, "_dynamo_instance", None)
    monkeypatch.setenv("TRACKER_TABLE_NAME", "tracker")

    with patch('src.utils.dynamo.boto3'):
        first = dynamo.get_dynamo()
        assert dynamo.get_dynamo() is first
