"""Converters for the final stage of the pipeline: IR to output artifacts.

Artifacts:
    1. proto3 files, one per package (ProtoWriter)
    2. enum-value-map.json, enum value name to OCSF label/code (EnumValueMapWriter)

Example:
-------
    >>> from ocsf_to_proto.converters import EnumValueMapWriter, ProtoWriter
    >>>
    >>> # Assuming result comes from SchemaMapper(schema).map()
    >>> ProtoWriter().write(result, "proto/")
    >>> EnumValueMapWriter().write(result, "proto/")
"""

from ocsf_to_proto.converters.enum_value_map import (
    ENUM_VALUE_MAP_FILE,
    EnumLookupEntry,
    EnumValueMap,
    EnumValueMapWriter,
)
from ocsf_to_proto.converters.proto_writer import ProtoWriter

__all__ = [
    "ENUM_VALUE_MAP_FILE",
    "EnumLookupEntry",
    "EnumValueMap",
    "EnumValueMapWriter",
    "ProtoWriter",
]
