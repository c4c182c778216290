"""Enhancer tool probe.

Resolves the external enhancer by dotted name once, at startup.
Absence is an expected configuration: the probe returns None, never raises.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from deployenhance.domain.exceptions import ToolUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from deployenhance.domain.model.configuration import EnhancerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportedEnhancerTool:
    """EnhancerToolPort over two resolved callables.

    Attributes:
        entry_point: Called as entry_point(list_of_paths, options)
        options_factory: Called as options_factory(dict_of_properties)
    """

    entry_point: Callable[..., object]
    options_factory: Callable[..., object]

    def create_options(self, properties: Mapping[str, str]) -> object:
        """Build options value via the resolved constructor."""
        return self.options_factory(dict(properties))

    def run(self, class_files: Sequence[str], options: object) -> None:
        """Invoke the resolved entry point."""
        self.entry_point(list(class_files), options)


def resolve_name(name: str) -> Callable[..., object]:
    """Resolve "package.module:attr.path" to a callable.

    Raises:
        ToolUnavailableError: Module cannot be imported, attribute is missing
            or the target is not callable.
    """
    module_name, sep, attr_path = name.partition(":")
    if not sep or not module_name or not attr_path:
        raise ToolUnavailableError(name=name, reason="expected 'module:attr'")

    try:
        target: object = importlib.import_module(module_name)
    except Exception as e:  # import of third-party code may raise anything
        raise ToolUnavailableError(name=name, reason=f"{type(e).__name__}: {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ToolUnavailableError(name=name, reason=f"no attribute '{attr}'") from e

    if not callable(target):
        raise ToolUnavailableError(name=name, reason=f"{type(target).__name__} is not callable")

    return target


def probe_enhancer_tool(config: EnhancerConfig) -> ImportedEnhancerTool | None:
    """Resolve the enhancer entry point and its options constructor.

    Args:
        config: Names of both callables

    Returns:
        Bound tool, or None if either name cannot be resolved
    """
    try:
        entry_point = resolve_name(config.enhancer_entry_point)
        options_factory = resolve_name(config.options_factory)
    except ToolUnavailableError as e:
        logger.warning("enhancer can't be found, deploy-time enhancement will be skipped (%s)", e)
        return None

    logger.debug(
        "enhancer resolved: %s / %s", config.enhancer_entry_point, config.options_factory
    )
    return ImportedEnhancerTool(entry_point=entry_point, options_factory=options_factory)
