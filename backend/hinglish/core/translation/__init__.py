"""Translation package.

This package provides the translation pipeline and its collaborators.

Architecture:
- models/: Data models (TranslationContext, PipelineResult, etc.)
- strategies/: Strategy selection and prompt templates
- pipeline/: Pipeline components (ContextAnalyzer, TextProcessor, TranslationPipeline)
- gateway.py: Provider gateways (HTTP, LiteLLM)
- helper.py: Direct translation with a localized fallback
"""

from .errors import (
    TranslationError,
    ProviderError,
    ProviderTimeoutError,
    TranslationPipelineError,
)
from .gateway import (
    TranslationGateway,
    HttpTranslationGateway,
    LiteLLMTranslationGateway,
    GatewayFactory,
)
from .helper import TranslationHelper
from .models import (
    Domain,
    Tone,
    Strategy,
    SpecialElements,
    TranslationContext,
    TranslationOptions,
    ProviderRequest,
    ProviderResponse,
    PreprocessResult,
    PostprocessResult,
    PipelineMetadata,
    PipelineResult,
)
from .pipeline import (
    ContextAnalyzer,
    TextProcessor,
    TranslationPipeline,
    PipelineFactory,
    calculate_confidence,
)
from .strategies import StrategyRouter, select_strategy

__all__ = [
    # Errors
    "TranslationError",
    "ProviderError",
    "ProviderTimeoutError",
    "TranslationPipelineError",
    # Gateways
    "TranslationGateway",
    "HttpTranslationGateway",
    "LiteLLMTranslationGateway",
    "GatewayFactory",
    "TranslationHelper",
    # Models
    "Domain",
    "Tone",
    "Strategy",
    "SpecialElements",
    "TranslationContext",
    "TranslationOptions",
    "ProviderRequest",
    "ProviderResponse",
    "PreprocessResult",
    "PostprocessResult",
    "PipelineMetadata",
    "PipelineResult",
    # Pipeline
    "ContextAnalyzer",
    "TextProcessor",
    "TranslationPipeline",
    "PipelineFactory",
    "calculate_confidence",
    "StrategyRouter",
    "select_strategy",
]
