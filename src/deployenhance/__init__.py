"""deployenhance - deploy-time bytecode enhancement of persistent classes."""

__version__ = "0.1.0"

from deployenhance.application.services.enhancer import DeployTimeEnhancer
from deployenhance.domain.model.configuration import EnhancerConfig
from deployenhance.domain.model.deployment_event import DeploymentEvent
from deployenhance.domain.model.report import EnhancementReport

__all__ = [
    "DeployTimeEnhancer",
    "DeploymentEvent",
    "EnhancementReport",
    "EnhancerConfig",
    "__version__",
]
