"""Domain model: immutable value objects."""

from deployenhance.domain.model.configuration import EnhancerConfig
from deployenhance.domain.model.deployment_event import DeploymentEvent
from deployenhance.domain.model.descriptor import (
    DescriptorEntry,
    DescriptorMapping,
    DiscoveredDescriptor,
)
from deployenhance.domain.model.enhancement_unit import EnhancementUnit
from deployenhance.domain.model.extraction import Extraction
from deployenhance.domain.model.report import DescriptorOutcome, EnhancementReport, OutcomeStatus

__all__ = [
    "DeploymentEvent",
    "DescriptorEntry",
    "DescriptorMapping",
    "DescriptorOutcome",
    "DiscoveredDescriptor",
    "EnhancementReport",
    "EnhancementUnit",
    "EnhancerConfig",
    "Extraction",
    "OutcomeStatus",
]
