"""Application services: pipeline stages and the orchestrating facade."""

from deployenhance.application.services.cleanup import CleanupManager
from deployenhance.application.services.descriptor_parser import DescriptorParser
from deployenhance.application.services.enhancer import DeployTimeEnhancer
from deployenhance.application.services.invoker import EnhancementInvoker
from deployenhance.application.services.resolver import (
    build_entry,
    resolve_class_roots,
    resolve_reference,
)

__all__ = [
    "CleanupManager",
    "DeployTimeEnhancer",
    "DescriptorParser",
    "EnhancementInvoker",
    "build_entry",
    "resolve_class_roots",
    "resolve_reference",
]
