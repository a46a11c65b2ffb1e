"""ocsf-to-proto: Generator for Protocol Buffers schemas from the OCSF event schema.

This package provides tools for:
- Loading an exported OCSF schema (JSON or YAML)
- Mapping event classes and objects to an Intermediate Representation (IR)
- Writing proto3 files and an enum value lookup table

Quick Start:
    >>> from ocsf_to_proto.models import load_ocsf_schema
    >>> from ocsf_to_proto.transform import SchemaMapper
    >>> from ocsf_to_proto.converters import ProtoWriter
    >>>
    >>> schema = load_ocsf_schema("ocsf-schema.json")
    >>> result = SchemaMapper(schema).map()
    >>> ProtoWriter().write(result, "proto/")

Modules:
    models: Pydantic models for the OCSF schema and generator configuration
    ir: Intermediate Representation (messages, enums, packages, registry)
    transform: OCSF to IR mapping, naming and import resolution
    converters: IR to proto3 text and enum value map
    diagnostics: Data-quality and output issues collected during a run
    cli: Command-line interface
"""

__version__ = "0.1.0"
