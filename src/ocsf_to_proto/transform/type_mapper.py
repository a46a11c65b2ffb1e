"""Map OCSF data type tags to proto3 types."""

from __future__ import annotations

from google.protobuf import struct_pb2

# Markers returned for non-scalar tags
OBJECT_TYPE = "object"
STRUCT_TYPE = struct_pb2.Struct.DESCRIPTOR.full_name  # google.protobuf.Struct
UNKNOWN_TYPE = "unknown"

STRUCT_PROTO_FILE = struct_pb2.DESCRIPTOR.name  # google/protobuf/struct.proto

# Base tag of string enums that stay plain strings
STRING_TYPE_TAG = "string_t"

_STRING_LIKE_TAGS = (
    "string_t",
    "bytestring_t",
    "datetime_t",
    "email_t",
    "file_hash_t",
    "file_name_t",
    "hostname_t",
    "ip_t",
    "mac_t",
    "process_name_t",
    "resource_uid_t",
    "subnet_t",
    "url_t",
    "username_t",
    "uuid_t",
)

# Mapping from OCSF type tags to proto3 types
OCSF_TYPE_TO_PROTO: dict[str, str] = {
    "boolean_t": "bool",
    "integer_t": "int32",
    "long_t": "int64",
    "float_t": "float",
    "port_t": "int32",
    "timestamp_t": "int64",
    "json_t": STRUCT_TYPE,
    "object_t": OBJECT_TYPE,
    **{tag: "string" for tag in _STRING_LIKE_TAGS},
}


def map_type(type_tag: str) -> str:
    """Map an OCSF type tag to a proto3 type.

    Args:
    ----
        type_tag: OCSF data type (e.g. "integer_t").

    Returns:
    -------
        Proto scalar keyword, OBJECT_TYPE, STRUCT_TYPE, or UNKNOWN_TYPE for
        tags outside the known set.

    """
    return OCSF_TYPE_TO_PROTO.get(type_tag, UNKNOWN_TYPE)


def is_known_type(type_tag: str) -> bool:
    return type_tag in OCSF_TYPE_TO_PROTO
