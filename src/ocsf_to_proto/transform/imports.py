"""Compute the proto imports a message needs."""

from __future__ import annotations

from ocsf_to_proto.ir.registry import Registry
from ocsf_to_proto.ir.types import FieldKind, Message
from ocsf_to_proto.transform.naming import NameNormalizer
from ocsf_to_proto.transform.type_mapper import STRUCT_PROTO_FILE


class ImportResolver:
    """Resolve the files a message's fields refer to."""

    def __init__(self, registry: Registry, normalizer: NameNormalizer) -> None:
        self.registry = registry
        self.normalizer = normalizer

    def compute_imports(self, message: Message) -> set[str]:
        """Return the proto file paths message must import.

        Object fields import the target message's file, struct fields the
        well-known struct file and enum fields the enum's file. Unresolved
        object fields contribute nothing. The message's own file is never
        included.

        Raises
        ------
            RegistryError: If a resolved object or enum is missing from the registry.

        """
        own_path = message.package.proto_file_path
        imports: set[str] = set()

        for field in message.fields:
            path = ""
            if field.kind is FieldKind.OBJECT:
                if not field.resolved:
                    continue
                target = self.registry.require_message(self.normalizer.normalize(field.type_name))
                path = target.package.proto_file_path
            elif field.kind is FieldKind.STRUCT:
                path = STRUCT_PROTO_FILE
            elif field.kind is FieldKind.ENUM:
                enum = self.registry.require_enum(field.type_name)
                path = enum.package.proto_file_path

            if path and path != own_path:
                imports.add(path)

        return imports
