"""IR model for the proto package hierarchy."""

from __future__ import annotations

from collections.abc import Iterator


class Package:
    """A node in the proto package tree.

    Each node maps to one proto package and one output file. Children are
    created on first request and reused afterwards, so requesting the same
    path twice yields the same node.

    Attributes
    ----------
        name: Local name of the package (one path segment).
        parent: Enclosing package, None for the root.

    """

    def __init__(self, name: str, parent: Package | None = None) -> None:
        """Initialize a package node."""
        self.name = name
        self.parent = parent
        self._children: dict[str, Package] = {}

    def __repr__(self) -> str:
        return f"Package({self.full_name!r})"

    @property
    def children(self) -> list[Package]:
        """Child packages sorted by name."""
        return [self._children[name] for name in sorted(self._children)]

    def child(self, name: str) -> Package:
        """Get or create the child package with the given name."""
        node = self._children.get(name)
        if node is None:
            node = Package(name, self)
            self._children[name] = node
        return node

    def package_ref(self, *names: str) -> Package:
        """Get or create a descendant by walking the given path segments."""
        node = self
        for name in names:
            node = node.child(name)
        return node

    def lineage(self) -> list[Package]:
        """Nodes from the root down to this package."""
        chain: list[Package] = []
        node: Package | None = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    @property
    def full_name(self) -> str:
        """Dotted package name, e.g. 'ocsf.events.system'."""
        return ".".join(node.name for node in self.lineage())

    @property
    def dir_path(self) -> str:
        """Directory of the output file, e.g. 'ocsf/events/system'."""
        return "/".join(node.name for node in self.lineage())

    @property
    def proto_file_path(self) -> str:
        """Output file path, e.g. 'ocsf/events/system/system.proto'."""
        return f"{self.dir_path}/{self.name}.proto"

    def walk(self) -> Iterator[Package]:
        """Yield this package and all descendants, depth-first by name."""
        yield self
        for child in self.children:
            yield from child.walk()
