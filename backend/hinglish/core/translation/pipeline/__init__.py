"""Translation pipeline components.

This module provides the core pipeline components for translation:
- ContextAnalyzer: Builds TranslationContext from source text
- TextProcessor: Pre- and post-processing around the provider call
- TranslationPipeline: Orchestrates the complete flow
"""

from .context_analyzer import ContextAnalyzer
from .text_processor import TextProcessor
from .pipeline import (
    PipelineFactory,
    TranslationPipeline,
    calculate_confidence,
)

__all__ = [
    "ContextAnalyzer",
    "TextProcessor",
    "TranslationPipeline",
    "PipelineFactory",
    "calculate_confidence",
]
