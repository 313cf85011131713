"""Application layer - configuration mutation API and orchestration."""

from .configurator import WardrobeConfigurator
from .dtos import ModuleControlView, MutationResult, SliderRange

__all__ = [
    "ModuleControlView",
    "MutationResult",
    "SliderRange",
    "WardrobeConfigurator",
]
