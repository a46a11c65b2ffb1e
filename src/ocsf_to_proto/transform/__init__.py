"""OCSF to IR (Intermediate Representation) transformation module.

The transformation process:
    1. Normalize event and object names to canonical proto names
    2. Map attribute types to proto3 types
    3. Resolve nested objects into shared messages (once per name)
    4. Build one enum per enumerated (message, attribute) pair
    5. Compute the import set of each message

Primary Class:
    SchemaMapper: Main mapper class

Example:
-------
    >>> from ocsf_to_proto.models import load_ocsf_schema
    >>> from ocsf_to_proto.transform import SchemaMapper
    >>>
    >>> schema = load_ocsf_schema("ocsf-schema.json")
    >>> result = SchemaMapper(schema).map(["process_activity"])
    >>> print(f"Messages: {len(result.registry.messages)}")
    >>> print(f"Enums: {len(result.registry.enums)}")
"""

from ocsf_to_proto.transform.context import MappingContext, MappingResult
from ocsf_to_proto.transform.imports import ImportResolver
from ocsf_to_proto.transform.mapper import EnumResolver, ObjectResolver, SchemaMapper
from ocsf_to_proto.transform.naming import NameNormalizer

__all__ = [
    "EnumResolver",
    "ImportResolver",
    "MappingContext",
    "MappingResult",
    "NameNormalizer",
    "ObjectResolver",
    "SchemaMapper",
]
