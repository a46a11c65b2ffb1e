"""Mutable state of a single mapping run."""

from __future__ import annotations

from dataclasses import dataclass, field

from ocsf_to_proto.diagnostics import MappingReport
from ocsf_to_proto.ir.package import Package
from ocsf_to_proto.ir.registry import Registry
from ocsf_to_proto.models.config import GeneratorConfig
from ocsf_to_proto.models.schema import OcsfSchema
from ocsf_to_proto.transform.naming import NameNormalizer, last_path_segment


@dataclass
class MappingContext:
    """Everything one run shares: schema, config, naming memo, registry, packages.

    A new context is created for every run; nothing is kept between runs.
    Not safe for concurrent use.
    """

    schema: OcsfSchema
    config: GeneratorConfig
    normalizer: NameNormalizer
    registry: Registry
    root_package: Package
    report: MappingReport = field(default_factory=MappingReport)

    @classmethod
    def create(cls, schema: OcsfSchema, config: GeneratorConfig) -> MappingContext:
        """Build a fresh context for one run."""
        return cls(
            schema=schema,
            config=config,
            normalizer=NameNormalizer(preprocessor=last_path_segment),
            registry=Registry(),
            root_package=Package(config.root_package),
        )


@dataclass
class MappingResult:
    """Output of a run, consumed by the writers."""

    registry: Registry
    root_package: Package
    report: MappingReport
    normalizer: NameNormalizer
    config: GeneratorConfig
