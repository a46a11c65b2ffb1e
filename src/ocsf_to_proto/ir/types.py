"""IR models for messages, fields and enums.

These map one-to-one onto proto3 constructs. Entities are mutable because
messages are registered before their fields are known and enums gain values
as attributes are processed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ocsf_to_proto.ir.package import Package


class FieldKind(PyEnum):
    """How a field's type_name is interpreted."""

    PRIMITIVE = "primitive"  # proto scalar keyword
    OBJECT = "object"  # message name
    STRUCT = "struct"  # google.protobuf.Struct
    ENUM = "enum"  # enum name


class EntityState(PyEnum):
    """Registration state of a message or enum."""

    RESERVED = "reserved"  # registered, still being populated
    COMPLETE = "complete"


@dataclass(eq=False)
class Field:
    """A member of a message.

    Attributes
    ----------
        name: Attribute name from the schema.
        type_name: Scalar keyword, object name or enum key depending on kind.
        kind: Field classification.
        required: Attribute requirement is "required".
        repeated: Attribute is an array.
        map: Attribute is a map.
        comment: Documentation key/value pairs.
        resolved: False for object fields whose object is missing from the schema.
        message: Owning message, set by Message.add_field.

    """

    name: str
    type_name: str
    kind: FieldKind = FieldKind.PRIMITIVE
    required: bool = False
    repeated: bool = False
    map: bool = False
    comment: dict[str, str] = field(default_factory=dict)
    resolved: bool = True
    message: Message | None = field(default=None, repr=False)


@dataclass(eq=False)
class Message:
    """A proto message built from an event class or object.

    Attributes
    ----------
        source_name: Name in the OCSF schema.
        name: Canonical (normalized) name, also the registry key.
        group_key: Grouping label ("Event: <category>" or "Object").
        package: Package the message is emitted in.
        comment: Documentation key/value pairs.
        fields: Fields in build order.
        state: Registration state.

    """

    source_name: str
    name: str
    package: Package
    group_key: str = ""
    comment: dict[str, str] = field(default_factory=dict)
    fields: list[Field] = field(default_factory=list)
    state: EntityState = EntityState.RESERVED

    def add_field(self, item: Field) -> None:
        """Append a field and point it back at this message."""
        item.message = self
        self.fields.append(item)

    def sorted_fields(self) -> list[Field]:
        """Fields ordered by name, as numbered in the output."""
        return sorted(self.fields, key=lambda f: f.name)

    @property
    def reference(self) -> str:
        """Fully-qualified proto type name."""
        return f"{self.package.full_name}.{self.name}"


@dataclass(eq=False)
class EnumValue:
    """A value of an enum.

    Attributes
    ----------
        name: Display label (the entry caption).
        value: Numeric code from the schema.
        comment: Documentation key/value pairs.
        enum: Owning enum, set by Enum.add_value.

    """

    name: str
    value: int
    comment: dict[str, str] = field(default_factory=dict)
    enum: Enum | None = field(default=None, repr=False)


def enum_key(message_name: str, field_name: str) -> str:
    """Registry key of the enum of a (message, attribute) pair."""
    return f"{message_name} {field_name}"


@dataclass(eq=False)
class Enum:
    """A proto enum scoped to one (message, attribute) pair.

    Attributes
    ----------
        name: Canonical (normalized) name, as emitted.
        package: Package the enum is emitted in.
        values: Values in build order.
        state: Registration state.
        key: Registry key, see enum_key.

    """

    name: str
    package: Package
    values: list[EnumValue] = field(default_factory=list)
    state: EntityState = EntityState.RESERVED
    key: str = ""

    def get_value(self, label: str) -> EnumValue | None:
        """Get a value by display label."""
        for value in self.values:
            if value.name == label:
                return value
        return None

    def add_value(self, value: EnumValue) -> bool:
        """Add a value unless its label is already present.

        Returns
        -------
            True if the value was added, False if the label already existed.

        """
        if self.get_value(value.name) is not None:
            return False
        value.enum = self
        self.values.append(value)
        return True

    @property
    def reference(self) -> str:
        """Fully-qualified proto type name."""
        return f"{self.package.full_name}.{self.name}"
