"""Enhancer tool port: the optional external bytecode enhancer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class EnhancerToolPort(Protocol):
    """Contract for the external enhancer, once resolved.

    Obtained from probe_enhancer_tool(); absent tool = None, not a stub.

    Example:
        tool = probe_enhancer_tool(EnhancerConfig())
        if tool is not None:
            options = tool.create_options({"propertiesFile": "/app/META-INF/persistence.xml"})
            tool.run(["/app/com/acme/Order.class"], options)
    """

    def create_options(self, properties: Mapping[str, str]) -> object:
        """Build the tool's options value from a property mapping.

        May raise anything: callers treat failure as systemic.
        """
        ...

    def run(self, class_files: Sequence[str], options: object) -> None:
        """Enhance class files in place.

        May raise anything: callers treat failure as per-descriptor.
        """
        ...
