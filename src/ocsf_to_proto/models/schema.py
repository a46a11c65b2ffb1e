"""Models for the exported OCSF schema.

Only the parts of the export used by the mapper are modelled; everything
else in the document (types, profiles, dictionaries...) is ignored.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class OcsfEnumEntry(BaseModel):
    """A single enumeration entry of an attribute.

    Example:
    -------
        ```json
        "1": {"caption": "Launch", "description": "A new process was launched."}
        ```

    """

    model_config = ConfigDict(extra="ignore")

    caption: Annotated[str, Field(description="Display label of the value")]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description"),
    ]


class OcsfAttribute(BaseModel):
    """An attribute of an event class or object."""

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str | None, Field(default=None, description="Attribute name")]
    caption: Annotated[str, Field(default="", description="Display caption")]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description"),
    ]
    type: Annotated[str, Field(description="OCSF data type tag (e.g. 'string_t')")]
    requirement: Annotated[
        str | None,
        Field(default=None, description="required, recommended or optional"),
    ]
    is_array: Annotated[bool, Field(default=False, description="Attribute is a list")]
    is_map: Annotated[bool, Field(default=False, description="Attribute is a map")]
    enum: Annotated[
        dict[str, OcsfEnumEntry],
        Field(default_factory=dict, description="Enumeration code to entry"),
    ]
    object_type: Annotated[
        str | None,
        Field(default=None, description="Object name for object_t attributes"),
    ]
    profile: Annotated[
        str | None,
        Field(default=None, description="Profile that contributes the attribute"),
    ]


class OcsfEvent(BaseModel):
    """An OCSF event class."""

    model_config = ConfigDict(extra="ignore")

    name: str
    caption: str | None = None
    category: str
    uid: int
    attributes: dict[str, OcsfAttribute] = Field(default_factory=dict)


class OcsfObject(BaseModel):
    """An OCSF object definition."""

    model_config = ConfigDict(extra="ignore")

    name: str
    caption: str | None = None
    attributes: dict[str, OcsfAttribute] = Field(default_factory=dict)


class OcsfSchema(BaseModel):
    """Root model of an exported OCSF schema.

    Example:
    -------
        ```json
        {
          "version": "1.1.0",
          "classes": {"process_activity": {...}},
          "objects": {"process": {...}}
        }
        ```

    """

    model_config = ConfigDict(extra="ignore")

    version: Annotated[str, Field(default="", description="OCSF schema version")]
    classes: Annotated[
        dict[str, OcsfEvent],
        Field(default_factory=dict, description="Event classes by name"),
    ]
    objects: Annotated[
        dict[str, OcsfObject],
        Field(default_factory=dict, description="Objects by name"),
    ]

    def events(self, names: list[str] | None = None) -> list[OcsfEvent]:
        """Return the selected event classes.

        Args:
        ----
            names: Event class names to select. All classes when empty.

        Returns:
        -------
            Events in the order requested (schema order when all).

        Raises:
        ------
            KeyError: If a requested name is not a class of the schema.

        """
        if not names:
            return list(self.classes.values())

        missing = [name for name in names if name not in self.classes]
        if missing:
            raise KeyError(f"Unknown event classes: {', '.join(missing)}")

        return [self.classes[name] for name in names]

    def get_object(self, name: str) -> OcsfObject | None:
        """Get an object definition by name."""
        return self.objects.get(name)
