"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from ocsf_to_proto.models import OcsfSchema

from tests.fixtures.schemas import attr


@pytest.fixture
def sample_schema_data() -> dict[str, Any]:
    """Return a small but representative schema export."""
    return {
        "version": "1.1.0",
        "classes": {
            "process_activity": {
                "name": "process_activity",
                "caption": "Process Activity",
                "category": "system",
                "uid": 1007,
                "attributes": {
                    "activity_id": attr(
                        "integer_t",
                        "Activity ID",
                        requirement="required",
                        enum={
                            "99": {"caption": "Other"},
                            "0": {"caption": "Unknown"},
                            "1": {"caption": "Launch"},
                            "2": {"caption": "Terminate"},
                        },
                    ),
                    "actor": attr("object_t", "Actor", object_type="actor"),
                    "process": attr(
                        "object_t", "Process", requirement="required", object_type="process"
                    ),
                    "status": attr(
                        "string_t",
                        "Status",
                        enum={
                            "Success": {"caption": "Success"},
                            "Failure": {"caption": "Failure"},
                        },
                    ),
                    "time": attr("timestamp_t", "Event Time", requirement="required"),
                    "unmapped": attr("object_t", "Unmapped Data", object_type="object"),
                },
            },
            "network_activity": {
                "name": "network_activity",
                "caption": "Network Activity",
                "category": "network",
                "uid": 4001,
                "attributes": {
                    "activity_id": attr(
                        "integer_t",
                        "Activity ID",
                        requirement="required",
                        enum={"0": {"caption": "Unknown"}, "1": {"caption": "Open"}},
                    ),
                    "actor": attr("object_t", "Actor", object_type="actor"),
                    "device": attr(
                        "object_t", "Device", object_type="device", profile="host"
                    ),
                    "src_endpoint": attr(
                        "object_t", "Source Endpoint", object_type="network_endpoint"
                    ),
                },
            },
        },
        "objects": {
            "actor": {
                "name": "actor",
                "attributes": {
                    "process": attr("object_t", "Process", object_type="process"),
                    "user": attr("object_t", "User", object_type="user"),
                },
            },
            "process": {
                "name": "process",
                "attributes": {
                    "file": attr("object_t", "File", object_type="file"),
                    "name": attr("process_name_t", "Name"),
                    "parent_process": attr(
                        "object_t", "Parent Process", object_type="process"
                    ),
                    "pid": attr("integer_t", "Process ID"),
                    "user": attr("object_t", "User", object_type="user"),
                },
            },
            "file": {
                "name": "file",
                "attributes": {
                    "name": attr("file_name_t", "Name", requirement="required"),
                    "type_id": attr(
                        "integer_t",
                        "Type ID",
                        enum={"0": {"caption": "Unknown"}, "1": {"caption": "Regular File"}},
                    ),
                },
            },
            "user": {
                "name": "user",
                "attributes": {
                    "groups": attr("string_t", "Groups", is_array=True),
                    "name": attr("username_t", "Name"),
                },
            },
            "network_endpoint": {
                "name": "network_endpoint",
                "attributes": {
                    "ip": attr("ip_t", "IP Address"),
                    "port": attr("port_t", "Port"),
                },
            },
        },
    }


@pytest.fixture
def sample_schema(sample_schema_data: dict[str, Any]) -> OcsfSchema:
    """Return the sample schema as a validated model."""
    return OcsfSchema.model_validate(sample_schema_data)


@pytest.fixture
def schema_file(tmp_path: Path, sample_schema_data: dict[str, Any]) -> Path:
    """Write the sample schema export to a JSON file."""
    path = tmp_path / "ocsf-schema.json"
    path.write_text(json.dumps(sample_schema_data))
    return path
