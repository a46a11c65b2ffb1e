"""Pydantic models for the OCSF schema export and generator configuration.

Primary Entry Points:
    load_ocsf_schema(path): Load and validate an exported OCSF schema
    validate_ocsf_schema(path): Validate and return list of errors
    load_generator_config(path): Load generator options
    OcsfSchema: Root model for the schema export

Model Hierarchy:
    OcsfSchema (root)
    ├── OcsfEvent - event classes, keyed by name
    │   └── OcsfAttribute - typed attributes
    │       └── OcsfEnumEntry - enumeration entries
    └── OcsfObject - shared objects, keyed by name
"""

from ocsf_to_proto.models.config import GeneratorConfig
from ocsf_to_proto.models.loader import (
    LoaderError,
    load_generator_config,
    load_ocsf_schema,
    load_yaml_file,
    validate_ocsf_schema,
)
from ocsf_to_proto.models.schema import (
    OcsfAttribute,
    OcsfEnumEntry,
    OcsfEvent,
    OcsfObject,
    OcsfSchema,
)

__all__ = [
    "GeneratorConfig",
    "LoaderError",
    "load_generator_config",
    "load_ocsf_schema",
    "load_yaml_file",
    "validate_ocsf_schema",
    "OcsfAttribute",
    "OcsfEnumEntry",
    "OcsfEvent",
    "OcsfObject",
    "OcsfSchema",
]
