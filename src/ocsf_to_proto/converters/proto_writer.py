"""Write proto3 files from a mapping result.

One file is written per package that holds at least one message or enum.
All orderings are fixed so that the same input always yields the same
bytes: imports by path, messages and enums by name, fields by name.

Field numbers follow the sorted field position, so adding or renaming an
attribute renumbers the fields after it.
"""

from __future__ import annotations

from pathlib import Path

from ocsf_to_proto.diagnostics import DiagnosticCodes
from ocsf_to_proto.ir.package import Package
from ocsf_to_proto.ir.registry import RegistryError
from ocsf_to_proto.ir.types import EntityState, Enum, Field, FieldKind, Message
from ocsf_to_proto.transform.context import MappingResult
from ocsf_to_proto.transform.imports import ImportResolver
from ocsf_to_proto.transform.naming import to_field_name, to_screaming_snake
from ocsf_to_proto.transform.type_mapper import STRUCT_TYPE

PROTO_SYNTAX = "proto3"


def _comment_lines(comment: dict[str, str], indent: str = "") -> list[str]:
    return [f"{indent}// {key}: {' '.join(str(value).split())}" for key, value in comment.items()]


class ProtoWriter:
    """Render and write proto3 files.

    Usage:
        writer = ProtoWriter()
        writer.write(result, Path("proto"))

    Or for in-memory rendering:
        files = writer.render(result)  # {"ocsf/objects/objects.proto": "..."}
    """

    def __init__(self, indent: str = "\t") -> None:
        """Initialize the writer.

        Args:
        ----
            indent: Indentation used inside message and enum blocks.

        """
        self._indent = indent

    def render(self, result: MappingResult) -> dict[str, str]:
        """Render every non-empty package.

        Returns
        -------
            Mapping of relative proto file path to file content.

        Raises
        ------
            RegistryError: If a message is still being populated or a
                reference points at an unregistered entity.

        """
        resolver = ImportResolver(result.registry, result.normalizer)
        files: dict[str, str] = {}

        for package in result.root_package.walk():
            messages = result.registry.messages_in(package)
            enums = result.registry.enums_in(package)
            if not messages and not enums:
                continue
            files[package.proto_file_path] = self.render_package(
                package, messages, enums, result, resolver
            )

        return files

    def write(self, result: MappingResult, output_dir: Path) -> list[Path]:
        """Render and write all files below output_dir.

        A file that cannot be written is reported as E100 on the result's
        report; the remaining files are still written.

        Returns
        -------
            Paths of the files written.

        """
        output_dir = Path(output_dir)
        written: list[Path] = []

        for rel_path, content in self.render(result).items():
            target = output_dir / rel_path
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content, encoding="utf-8")
            except (OSError, UnicodeError) as e:
                result.report.add_error(
                    DiagnosticCodes.E100_PROTO_WRITE_FAILED,
                    f"Failed to write {target}: {e}",
                    rel_path,
                )
                continue
            written.append(target)

        return written

    def render_package(
        self,
        package: Package,
        messages: list[Message],
        enums: list[Enum],
        result: MappingResult,
        resolver: ImportResolver,
    ) -> str:
        """Render one proto file."""
        content = [
            f'syntax = "{PROTO_SYNTAX}";',
            f"package {package.full_name};",
            f'option go_package = "{result.config.golang_package(package.dir_path)}";',
            f'option java_package = "{result.config.java_package(package.full_name)}";',
            "option java_multiple_files = true;",
        ]

        imports: set[str] = set()
        for message in messages:
            imports |= resolver.compute_imports(message)
        imports.discard(package.proto_file_path)
        content.extend(f'import "{path}";' for path in sorted(imports))

        content.extend(self.render_message(message, result) for message in messages)
        content.extend(self.render_enum(enum) for enum in enums)

        return "\n\n".join(content) + "\n"

    def render_message(self, message: Message, result: MappingResult) -> str:
        """Render a message block with fields numbered in name order."""
        if message.state is not EntityState.COMPLETE:
            raise RegistryError(f"Message {message.name!r} is not complete")

        lines = _comment_lines(message.comment)
        lines.append(f"message {message.name} {{")
        for number, field in enumerate(message.sorted_fields(), start=1):
            lines.extend(_comment_lines(field.comment, self._indent))
            lines.append(self._indent + self.render_field(field, number, result))
        lines.append("}")
        return "\n".join(lines)

    def render_field(self, field: Field, number: int, result: MappingResult) -> str:
        """Render a single field declaration (without indentation)."""
        type_name = self._field_type(field, result)
        name = to_field_name(field.name)

        if field.map:
            return f"map<string, {type_name}> {name} = {number};"

        label = ""
        if field.repeated:
            label = "repeated "
        elif not field.required:
            label = "optional "
        return f"{label}{type_name} {name} = {number};"

    def render_enum(self, enum: Enum) -> str:
        """Render an enum block with values in build order."""
        lines = [f"enum {enum.name} {{"]
        for value in enum.values:
            lines.extend(_comment_lines(value.comment, self._indent))
            value_name = to_screaming_snake(f"{enum.name} {value.name}")
            lines.append(f"{self._indent}{value_name} = {value.value};")
        lines.append("}")
        return "\n".join(lines)

    def _field_type(self, field: Field, result: MappingResult) -> str:
        if field.kind is FieldKind.STRUCT:
            return STRUCT_TYPE

        if field.kind is FieldKind.OBJECT:
            canonical = result.normalizer.normalize(field.type_name)
            if not field.resolved:
                return canonical or field.type_name
            return result.registry.require_message(canonical).reference

        if field.kind is FieldKind.ENUM:
            return result.registry.require_enum(field.type_name).reference

        return field.type_name
