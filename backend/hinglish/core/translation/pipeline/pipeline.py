"""Main translation pipeline orchestrator.

This module provides the TranslationPipeline class that coordinates
all pipeline components for end-to-end translation.
"""

import logging
from typing import Optional

from hinglish.config import Settings

from ..errors import TranslationPipelineError
from ..gateway import GatewayFactory, TranslationGateway
from ..models.context import TranslationContext, TranslationOptions
from ..models.result import PipelineMetadata, PipelineResult
from ..strategies import StrategyRouter
from .context_analyzer import ContextAnalyzer
from .text_processor import TextProcessor

logger = logging.getLogger(__name__)

# Confidence deductions per risk flag, applied independently
CONFIDENCE_PENALTIES = (
    ("requires_context", 20),
    ("has_idioms", 15),
    ("has_cultural_references", 15),
    ("is_technical", 10),
)


def calculate_confidence(context: TranslationContext) -> int:
    """Score how likely the text is to translate cleanly, 0 to 100."""
    score = 100
    for flag, penalty in CONFIDENCE_PENALTIES:
        if getattr(context, flag):
            score -= penalty
    return max(0, min(100, score))


class TranslationPipeline:
    """Main orchestrator for the translation pipeline.

    Coordinates the flow:
    preprocess -> analyze -> route + translate -> postprocess

    Analysis runs on the original text, not the cleaned one, since markers
    may depend on casing or punctuation that cleaning removes.
    """

    def __init__(
        self,
        router: StrategyRouter,
        analyzer: Optional[ContextAnalyzer] = None,
        processor: Optional[TextProcessor] = None,
    ):
        """Initialize translation pipeline.

        Args:
            router: Strategy router holding the provider gateway
            analyzer: Context analyzer (default instance if omitted)
            processor: Text processor (default instance if omitted)
        """
        self.router = router
        self.analyzer = analyzer or ContextAnalyzer()
        self.processor = processor or TextProcessor()

    async def process(
        self,
        text: str,
        options: Optional[TranslationOptions] = None,
    ) -> PipelineResult:
        """Execute the full translation pipeline.

        Args:
            text: Source text
            options: Prompt options (style, level, surrounding text)

        Returns:
            PipelineResult with translated text, confidence and metadata

        Raises:
            TranslationPipelineError: If any stage fails
        """
        options = options or TranslationOptions()
        try:
            # 1. Preprocess
            preprocessed = self.processor.preprocess(text)

            # 2. Analyze the original text
            context = self.analyzer.analyze(text)
            if options.surrounding_text:
                context = context.model_copy(
                    update={"surrounding_text": options.surrounding_text}
                )

            # 3. Route and translate
            translated = await self.router.translate(
                preprocessed.cleaned, context, options
            )

            # 4. Postprocess
            final = self.processor.postprocess(
                translated, context, preprocessed.special_elements
            )

            strategy = self.router.select_strategy(context)
            logger.debug(
                "Translated text: domain=%s tone=%s strategy=%s",
                context.domain.value,
                context.tone.value,
                strategy.value,
            )

            return PipelineResult(
                translated_text=final.text,
                confidence=calculate_confidence(context),
                metadata=PipelineMetadata(
                    domain=context.domain,
                    tone=context.tone,
                    strategy=strategy,
                ),
            )
        except Exception as e:
            logger.exception("Translation pipeline error")
            raise TranslationPipelineError(str(e)) from e


class PipelineFactory:
    """Factory for creating translation pipelines."""

    @staticmethod
    def create(
        config: Settings,
        gateway: Optional[TranslationGateway] = None,
    ) -> TranslationPipeline:
        """Create a configured translation pipeline.

        Args:
            config: Application settings
            gateway: Gateway override (built from settings if omitted)

        Returns:
            Configured TranslationPipeline
        """
        router = StrategyRouter(
            gateway=gateway or GatewayFactory.create(config),
            target_language_name=config.target_language_name,
            source_lang=config.source_lang,
            target_lang=config.target_lang,
            formality=config.formality,
        )
        return TranslationPipeline(router)
