"""Map OCSF event classes and objects to IR messages and enums."""

from __future__ import annotations

from ocsf_to_proto.diagnostics import DiagnosticCodes
from ocsf_to_proto.ir.types import Enum, EnumValue, Field, FieldKind, Message, enum_key
from ocsf_to_proto.models.common import parse_code
from ocsf_to_proto.models.config import GeneratorConfig
from ocsf_to_proto.models.schema import (
    OcsfAttribute,
    OcsfEnumEntry,
    OcsfEvent,
    OcsfObject,
    OcsfSchema,
)
from ocsf_to_proto.transform.context import MappingContext, MappingResult
from ocsf_to_proto.transform.naming import to_package_name
from ocsf_to_proto.transform.type_mapper import (
    OBJECT_TYPE,
    STRING_TYPE_TAG,
    STRUCT_TYPE,
    UNKNOWN_TYPE,
    is_known_type,
    map_type,
)

EVENTS_PACKAGE = "events"
OBJECTS_PACKAGE = "objects"
ENUMS_PACKAGE = "enums"

# object_type of attributes that hold a free-form object
GENERIC_OBJECT_TYPE = "object"


class EnumResolver:
    """Build enums for enumerated attributes.

    One enum exists per (message, attribute) pair. Entries are taken in
    ascending code order and deduplicated by display label, first one wins.
    """

    def __init__(self, context: MappingContext) -> None:
        self.context = context

    def resolve(self, message: Message, field: Field, attr: OcsfAttribute, path: str) -> Enum:
        """Get or create the enum of field and merge the attribute's entries into it.

        Enums are registered under the raw "<message> <attribute>" pair; only
        the emitted name is normalized, so pairs that normalize alike stay
        separate enums.
        """
        ctx = self.context
        key = enum_key(message.name, field.name)
        enum_name = ctx.normalizer.normalize(key)
        field.type_name = key

        package = message.package.child(ENUMS_PACKAGE)
        enum, existed = ctx.registry.get_or_create_enum(
            key,
            lambda: Enum(name=enum_name, package=package, key=key),
        )
        if not existed:
            self._check_name_collision(enum, path)

        for code, entry in self._ordered_entries(attr, path):
            existing = enum.get_value(entry.caption)
            if existing is not None:
                if existing.value != code:
                    ctx.report.add_warning(
                        DiagnosticCodes.W003_DUPLICATE_ENUM_LABEL,
                        f"Duplicate enum label {entry.caption!r} with code {code} "
                        f"ignored (kept {existing.value})",
                        path,
                        enum=enum_name,
                    )
                continue

            enum.add_value(
                EnumValue(
                    name=entry.caption,
                    value=code,
                    comment={"Type": "OCSF_VALUE", "EnumValue": str(code)},
                )
            )

        if enum.values and enum.values[0].value != 0:
            ctx.report.add_warning(
                DiagnosticCodes.W007_ENUM_WITHOUT_ZERO,
                f"Enum {enum_name!r} has no zero value; proto3 requires the first value to be 0",
                path,
                enum=enum_name,
            )

        ctx.registry.complete(enum)
        return enum

    def _check_name_collision(self, enum: Enum, path: str) -> None:
        for other in self.context.registry.enums:
            if other is not enum and other.name == enum.name:
                self.context.report.add_warning(
                    DiagnosticCodes.W006_ENUM_NAME_COLLISION,
                    f"Enum name {enum.name!r} is shared by {other.key!r} and {enum.key!r}",
                    path,
                    enum=enum.name,
                )
                return

    def _ordered_entries(
        self,
        attr: OcsfAttribute,
        path: str,
    ) -> list[tuple[int, OcsfEnumEntry]]:
        """Parse entry codes and order entries by code."""
        entries: list[tuple[int, OcsfEnumEntry]] = []
        for key, entry in attr.enum.items():
            try:
                code = parse_code(key)
            except ValueError:
                self.context.report.add_warning(
                    DiagnosticCodes.W004_INVALID_ENUM_CODE,
                    f"Enum code {key!r} is not an integer, using 0",
                    path,
                )
                code = 0
            entries.append((code, entry))

        entries.sort(key=lambda item: item[0])
        return entries


class ObjectResolver:
    """Populate messages from attribute maps, resolving nested objects.

    Nested objects become messages in the objects package. Each object name
    is resolved once: a message is registered before its own attributes are
    walked, so self references and cycles find it and stop.
    """

    def __init__(self, context: MappingContext, enums: EnumResolver) -> None:
        self.context = context
        self.enums = enums

    def populate(self, message: Message, attributes: dict[str, OcsfAttribute]) -> None:
        """Add one field per attribute to message."""
        for attr_name, attr in attributes.items():
            path = f"{message.source_name}.{attr_name}"
            field = self._build_field(message, attr_name, attr, path)
            message.add_field(field)

    def _build_field(
        self,
        message: Message,
        attr_name: str,
        attr: OcsfAttribute,
        path: str,
    ) -> Field:
        type_name = map_type(attr.type)
        if not is_known_type(attr.type):
            self.context.report.add_warning(
                DiagnosticCodes.W001_UNKNOWN_TYPE,
                f"Unknown type {attr.type!r}",
                path,
            )

        field = Field(
            name=attr_name,
            type_name=type_name,
            required=attr.requirement == "required",
            repeated=attr.is_array,
            map=attr.is_map,
            comment=self._field_comment(attr),
        )

        kind = FieldKind.PRIMITIVE
        if type_name == OBJECT_TYPE:
            kind = FieldKind.OBJECT
        elif type_name == STRUCT_TYPE:
            kind = FieldKind.STRUCT

        if kind is FieldKind.OBJECT and attr.object_type == GENERIC_OBJECT_TYPE:
            kind = FieldKind.STRUCT
            field.type_name = STRUCT_TYPE
        elif kind is FieldKind.OBJECT and not attr.object_type:
            kind = FieldKind.PRIMITIVE
            field.type_name = UNKNOWN_TYPE
            self.context.report.add_warning(
                DiagnosticCodes.W001_UNKNOWN_TYPE,
                "Object attribute has no object_type",
                path,
            )

        if attr.enum and attr.type == STRING_TYPE_TAG:
            # string enums document their values but stay strings
            kind = FieldKind.PRIMITIVE
            field.comment["AllowedValues"] = ", ".join(attr.enum)
        elif attr.enum:
            kind = FieldKind.ENUM

        field.kind = kind

        if kind is FieldKind.OBJECT:
            self._resolve_object(message, field, attr, path)
        elif kind is FieldKind.ENUM:
            self.enums.resolve(message, field, attr, path)

        return field

    def _field_comment(self, attr: OcsfAttribute) -> dict[str, str]:
        comment = {"Caption": attr.caption}
        if attr.profile:
            comment["Profile"] = attr.profile
        return comment

    def _resolve_object(
        self,
        message: Message,
        field: Field,
        attr: OcsfAttribute,
        path: str,
    ) -> None:
        ctx = self.context
        object_name = attr.object_type or ""
        field.type_name = object_name

        canonical = ctx.normalizer.normalize(object_name)
        if canonical == message.name or ctx.registry.has_message(canonical):
            return

        obj = ctx.schema.get_object(object_name)
        if obj is None:
            field.resolved = False
            ctx.report.add_warning(
                DiagnosticCodes.W002_UNRESOLVED_OBJECT,
                f"Object {object_name!r} not found in schema",
                path,
            )
            return

        child, existed = ctx.registry.get_or_create_message(
            canonical,
            lambda: self._object_message(obj, canonical),
        )
        if not existed:
            self.populate(child, obj.attributes)
            ctx.registry.complete(child)

    def _object_message(self, obj: OcsfObject, name: str) -> Message:
        ctx = self.context
        comment: dict[str, str] = {}
        if ctx.schema.version:
            comment["URL"] = _schema_url(ctx, "objects", obj.name)
        return Message(
            source_name=obj.name,
            name=name,
            group_key="Object",
            comment=comment,
            package=ctx.root_package.package_ref(OBJECTS_PACKAGE),
        )


class SchemaMapper:
    """Map an OCSF schema to IR messages and enums.

    This is the main entry point of the transformation. Every call to
    map() starts from an empty registry, package tree and naming memo.

    Usage:
        mapper = SchemaMapper(schema, config)
        result = mapper.map(["process_activity"])
    """

    def __init__(self, schema: OcsfSchema, config: GeneratorConfig | None = None) -> None:
        """Initialize the mapper."""
        self.schema = schema
        self.config = config or GeneratorConfig()

    def map(self, events: list[str] | None = None) -> MappingResult:
        """Map the selected event classes and every object they reach.

        Args:
        ----
            events: Event class names. Falls back to config.events, then to all.

        Returns:
        -------
            MappingResult holding the populated registry and package tree.

        Raises:
        ------
            KeyError: If a selected event class is not in the schema.

        """
        ctx = MappingContext.create(self.schema, self.config)
        objects = ObjectResolver(ctx, EnumResolver(ctx))

        for event in self.schema.events(events or self.config.events):
            self._map_event(ctx, objects, event)

        return MappingResult(
            registry=ctx.registry,
            root_package=ctx.root_package,
            report=ctx.report,
            normalizer=ctx.normalizer,
            config=ctx.config,
        )

    def _map_event(
        self,
        ctx: MappingContext,
        objects: ObjectResolver,
        event: OcsfEvent,
    ) -> Message:
        name = ctx.normalizer.normalize(event.name)
        if not name:
            ctx.report.add_warning(
                DiagnosticCodes.W005_EMPTY_NAME,
                f"Event name {event.name!r} normalizes to an empty name",
                event.name,
            )

        package = ctx.root_package.package_ref(EVENTS_PACKAGE, to_package_name(event.category))
        message, existed = ctx.registry.get_or_create_message(
            name,
            lambda: Message(
                source_name=event.name,
                name=name,
                group_key=f"Event: {event.category}",
                comment={
                    "Event": event.category,
                    "Event UID": str(event.uid),
                    "URL": _schema_url(ctx, "classes", event.name),
                },
                package=package,
            ),
        )
        if existed:
            return message

        objects.populate(message, event.attributes)
        ctx.registry.complete(message)
        return message


def _schema_url(ctx: MappingContext, section: str, name: str) -> str:
    parts = [ctx.config.schema_url.rstrip("/"), ctx.schema.version, section, name]
    return "/".join(part for part in parts if part)
