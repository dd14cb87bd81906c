"""Shared test fixtures for helper function tests."""

import os
import sys

import pytest

# Add the project root to Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../.."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def rpc_error_json():
    """JSON-RPC error response with snake_case keys and an all caps message."""
    return (
        '{"jsonrpc":"2.0","id":1,"error":'
        '{"code":10,"message":"VOLUMES_EXIST_ON_SET","want_camel":1}}'
    )


@pytest.fixture
def nested_mapping():
    """Mapping with a nested mapping and a list of mappings."""
    return {
        "some_key": 1,
        "a_map": {"some_key1": 1},
        "volume_sets": [
            {"set_id": 0, "total_bytes": 85899345920},
            {"set_id": 1, "free_bytes": 0, "member_disks": [{"disk_id": 7}]},
        ],
        "tags": ["snake_case_value", 3, None],
    }
