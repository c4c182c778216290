"""Enhancement invoker: options construction and tool invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deployenhance.domain.exceptions import EnhancementFailedError, OptionsConstructionError
from deployenhance.domain.model.configuration import DEFAULT_PROPERTIES_FILE_PROPERTY
from deployenhance.domain.model.enhancement_unit import EnhancementUnit

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from deployenhance.domain.ports.enhancer_tool import EnhancerToolPort


class EnhancementInvoker:
    """Runs the enhancer tool for one descriptor at a time.

    Tool exceptions are wrapped so the orchestrator can tell a systemic
    failure (options) from a per-descriptor one (run).
    """

    def __init__(
        self,
        tool: EnhancerToolPort,
        *,
        properties_file_property: str = DEFAULT_PROPERTIES_FILE_PROPERTY,
    ) -> None:
        """Initialize invoker.

        Args:
            tool: Resolved enhancer tool
            properties_file_property: Options key carrying the descriptor path

        Raises:
            TypeError: If tool is None
        """
        if tool is None:
            raise TypeError("tool must not be None")

        self._tool = tool
        self._property = properties_file_property

    def prepare(self, descriptor: Path, class_files: Sequence[str]) -> EnhancementUnit:
        """Build the enhancement unit for one descriptor.

        Raises:
            OptionsConstructionError: Options constructor raised
        """
        properties = {self._property: str(descriptor)}

        try:
            options = self._tool.create_options(properties)
        except Exception as e:
            raise OptionsConstructionError(descriptor, e) from e

        return EnhancementUnit(
            descriptor=descriptor,
            class_files=tuple(class_files),
            options=options,
        )

    def invoke(self, unit: EnhancementUnit) -> None:
        """Run the tool over the unit's class files.

        Raises:
            EnhancementFailedError: Tool raised
        """
        try:
            self._tool.run(unit.class_files, unit.options)
        except Exception as e:
            raise EnhancementFailedError(unit.descriptor, e) from e
