"""Website mockup generation: variant plan, generator, stream driver."""

from siteforge.generation.generator import GenerationFailedError, SiteGenerator, strip_code_fence
from siteforge.generation.stream import GeneratedSite, StreamDriver, StreamEvent
from siteforge.generation.variants import DesignVariant, get_variant_plan

__all__ = [
    "DesignVariant",
    "GeneratedSite",
    "GenerationFailedError",
    "SiteGenerator",
    "StreamDriver",
    "StreamEvent",
    "get_variant_plan",
    "strip_code_fence",
]
