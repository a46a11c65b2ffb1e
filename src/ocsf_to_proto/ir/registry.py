"""Run-scoped store of resolved messages and enums."""

from __future__ import annotations

from collections.abc import Callable

from ocsf_to_proto.ir.package import Package
from ocsf_to_proto.ir.types import EntityState, Enum, Message


class RegistryError(LookupError):
    """A message or enum expected in the registry is missing or incomplete."""


class Registry:
    """Holds at most one Message per canonical name and one Enum per enum key.

    Messages are reserved before their fields are populated, so a lookup made
    while recursing into a message's own attributes already finds it.

    Usage:
        message, existed = registry.get_or_create_message(
            "Process", lambda: Message(source_name="process", name="Process", package=pkg)
        )
        if not existed:
            ...populate fields...
            registry.complete(message)
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._messages: dict[str, Message] = {}
        self._enums: dict[str, Enum] = {}

    def get_or_create_message(
        self,
        name: str,
        factory: Callable[[], Message],
    ) -> tuple[Message, bool]:
        """Get the message registered under name, or reserve a new one.

        Args:
        ----
            name: Canonical message name.
            factory: Builds the message when none is registered.

        Returns:
        -------
            Tuple of (message, existed).

        """
        message = self._messages.get(name)
        if message is not None:
            return message, True

        message = factory()
        message.state = EntityState.RESERVED
        self._messages[name] = message
        return message, False

    def get_or_create_enum(
        self,
        name: str,
        factory: Callable[[], Enum],
    ) -> tuple[Enum, bool]:
        """Get the enum registered under an enum key, or register a new one."""
        enum = self._enums.get(name)
        if enum is not None:
            return enum, True

        enum = factory()
        enum.state = EntityState.RESERVED
        self._enums[name] = enum
        return enum, False

    def complete(self, entity: Message | Enum) -> None:
        """Mark a registered entity as fully populated."""
        entity.state = EntityState.COMPLETE

    def get_message(self, name: str) -> Message | None:
        """Get a message by canonical name."""
        return self._messages.get(name)

    def get_enum(self, name: str) -> Enum | None:
        """Get an enum by enum key."""
        return self._enums.get(name)

    def require_message(self, name: str) -> Message:
        """Get a message that must have been registered.

        Raises
        ------
            RegistryError: If no message is registered under name.

        """
        message = self._messages.get(name)
        if message is None:
            raise RegistryError(f"Message not registered: {name!r}")
        return message

    def require_enum(self, name: str) -> Enum:
        """Get an enum that must have been registered.

        Raises
        ------
            RegistryError: If no enum is registered under name.

        """
        enum = self._enums.get(name)
        if enum is None:
            raise RegistryError(f"Enum not registered: {name!r}")
        return enum

    def has_message(self, name: str) -> bool:
        return name in self._messages

    @property
    def messages(self) -> list[Message]:
        """All messages in registration order."""
        return list(self._messages.values())

    @property
    def enums(self) -> list[Enum]:
        """All enums in registration order."""
        return list(self._enums.values())

    def messages_in(self, package: Package) -> list[Message]:
        """Messages emitted in the given package, sorted by name."""
        return sorted(
            (m for m in self._messages.values() if m.package is package),
            key=lambda m: m.name,
        )

    def enums_in(self, package: Package) -> list[Enum]:
        """Enums emitted in the given package, sorted by name."""
        return sorted(
            (e for e in self._enums.values() if e.package is package),
            key=lambda e: e.name,
        )
