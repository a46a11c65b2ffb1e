"""Write the enum value lookup table.

Consumers receive proto enum values on the wire; the table maps each
fully-qualified enum value name back to its OCSF label and code:

    {
      "PROCESS_ACTIVITY_ACTIVITY_ID_LAUNCH": {"name": "Launch", "value": 1}
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic_core import PydanticSerializationError

from ocsf_to_proto.diagnostics import DiagnosticCodes
from ocsf_to_proto.transform.context import MappingResult
from ocsf_to_proto.transform.naming import to_screaming_snake

ENUM_VALUE_MAP_FILE = "enum-value-map.json"


class EnumLookupEntry(BaseModel):
    """Original label and code of an enum value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class EnumValueMap(RootModel[dict[str, EnumLookupEntry]]):
    """Lookup table keyed by SCREAMING_SNAKE enum value name."""


class EnumValueMapWriter:
    """Build and write the enum value lookup table."""

    def build(self, result: MappingResult) -> EnumValueMap:
        """Collect every enum value of the run, keys sorted."""
        entries: dict[str, EnumLookupEntry] = {}
        for enum in result.registry.enums:
            for value in enum.values:
                key = to_screaming_snake(f"{enum.name} {value.name}")
                entries[key] = EnumLookupEntry(name=value.name, value=value.value)

        return EnumValueMap({key: entries[key] for key in sorted(entries)})

    def dumps(self, result: MappingResult) -> str:
        """Serialize the lookup table as indented JSON."""
        return self.build(result).model_dump_json(indent=2) + "\n"

    def write(self, result: MappingResult, output_dir: Path) -> Path | None:
        """Write the lookup table to output_dir.

        Serialization and write failures are reported as E101 on the
        result's report and the file is skipped.

        Returns
        -------
            Path written, or None if the table could not be written.

        """
        target = Path(output_dir) / ENUM_VALUE_MAP_FILE
        try:
            payload = self.dumps(result)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(payload, encoding="utf-8")
        except (PydanticSerializationError, OSError, UnicodeError) as e:
            result.report.add_error(
                DiagnosticCodes.E101_ENUM_MAP_FAILED,
                f"Failed to write enum value map: {e}",
                ENUM_VALUE_MAP_FILE,
            )
            return None

        return target
