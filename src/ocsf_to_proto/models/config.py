"""Generator configuration."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class GeneratorConfig(BaseModel):
    """Options controlling proto generation.

    Example:
    -------
        ```yaml
        root_package: ocsf
        golang_package_prefix: github.com/acme/ocsf-proto/gen/
        java_package_prefix: com.acme.
        events:
          - process_activity
          - network_activity
        ```

    """

    model_config = ConfigDict(extra="forbid")

    root_package: Annotated[
        str,
        Field(
            default="ocsf",
            min_length=1,
            pattern=r"^[a-z_][a-z0-9_]*$",
            description="Name of the root proto package",
        ),
    ]
    golang_package_prefix: Annotated[
        str,
        Field(default="", description="Prefix for the go_package option"),
    ]
    java_package_prefix: Annotated[
        str,
        Field(default="", description="Prefix for the java_package option"),
    ]
    schema_url: Annotated[
        str,
        Field(
            default="https://schema.ocsf.io",
            description="Base URL used in message documentation links",
        ),
    ]
    enum_value_map: Annotated[
        bool,
        Field(default=True, description="Write enum-value-map.json"),
    ]
    events: Annotated[
        list[str],
        Field(default_factory=list, description="Event classes to generate (all when empty)"),
    ]

    def golang_package(self, package_path: str) -> str:
        """Build the go_package option for a slash-separated package path."""
        return self.golang_package_prefix + package_path

    def java_package(self, package_name: str) -> str:
        """Build the java_package option for a dotted package name."""
        return self.java_package_prefix + package_name
