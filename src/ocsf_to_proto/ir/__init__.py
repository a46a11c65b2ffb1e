"""Intermediate Representation (IR) for OCSF to proto conversion.

The IR sits between the Pydantic schema models and the proto3 text:

1. Messages and enums are keyed by canonical name in a run-scoped Registry
2. Packages form a tree that decides output file grouping
3. Fields keep a back-reference to their message for import resolution
"""

from ocsf_to_proto.ir.package import Package
from ocsf_to_proto.ir.registry import Registry, RegistryError
from ocsf_to_proto.ir.types import (
    EntityState,
    Enum,
    EnumValue,
    Field,
    FieldKind,
    Message,
    enum_key,
)

__all__ = [
    "EntityState",
    "Enum",
    "EnumValue",
    "Field",
    "FieldKind",
    "Message",
    "Package",
    "Registry",
    "RegistryError",
    "enum_key",
]
