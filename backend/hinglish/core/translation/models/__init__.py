"""Translation pipeline data models.

This module provides structured data models for the translation pipeline,
ensuring type safety and clear contracts between components.
"""

from .context import (
    Domain,
    Tone,
    Strategy,
    SpecialElements,
    TranslationContext,
    TranslationOptions,
)
from .provider import ProviderRequest, ProviderResponse
from .result import (
    PreprocessResult,
    PostprocessResult,
    PipelineMetadata,
    PipelineResult,
)

__all__ = [
    # Context models
    "Domain",
    "Tone",
    "Strategy",
    "SpecialElements",
    "TranslationContext",
    "TranslationOptions",
    # Provider models
    "ProviderRequest",
    "ProviderResponse",
    # Result models
    "PreprocessResult",
    "PostprocessResult",
    "PipelineMetadata",
    "PipelineResult",
]
