"""Strategy router.

This module selects a translation strategy from a TranslationContext,
builds the strategy's prompt and hands it to the provider gateway.

Strategies are a tagged variant: the Strategy enum plus two tables, one for
selection order and one for prompt templates.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..models.context import Strategy, TranslationContext, TranslationOptions
from ..models.provider import ProviderRequest
from ..gateway import TranslationGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyPrompt:
    """Prompt template for one strategy."""

    template: str  # formatted with {language}
    uses_context: bool  # whether surrounding text is included


# Selection order, first match wins.
STRATEGY_RULES: Tuple[Tuple[Callable[[TranslationContext], bool], Strategy], ...] = (
    (lambda ctx: ctx.is_technical, Strategy.TECHNICAL),
    (lambda ctx: ctx.has_idioms, Strategy.IDIOMATIC),
    (lambda ctx: ctx.has_cultural_references, Strategy.CULTURAL),
    (lambda ctx: ctx.requires_context, Strategy.CONTEXTUAL),
)

STRATEGY_PROMPTS: Dict[Strategy, StrategyPrompt] = {
    Strategy.DIRECT: StrategyPrompt(
        "Translate this text directly to {language}:", uses_context=False
    ),
    Strategy.CONTEXTUAL: StrategyPrompt(
        "Translate this text to {language} considering the context:",
        uses_context=True,
    ),
    Strategy.IDIOMATIC: StrategyPrompt(
        "Translate this idiomatic expression to natural {language}:",
        uses_context=False,
    ),
    Strategy.TECHNICAL: StrategyPrompt(
        "Translate this technical text to {language} while maintaining "
        "technical accuracy:",
        uses_context=True,
    ),
    Strategy.CULTURAL: StrategyPrompt(
        "Translate this text to {language} while preserving cultural nuances:",
        uses_context=True,
    ),
}


def select_strategy(context: TranslationContext) -> Strategy:
    """Pick a strategy from the context's four risk flags."""
    for predicate, strategy in STRATEGY_RULES:
        if predicate(context):
            return strategy
    return Strategy.DIRECT


class StrategyRouter:
    """Routes text to a strategy prompt and the provider gateway.

    The gateway is injected; the router holds no other state.
    """

    def __init__(
        self,
        gateway: TranslationGateway,
        target_language_name: str = "Hinglish",
        source_lang: str = "en",
        target_lang: str = "hi-Latn",
        formality: str = "neutral",
    ):
        self.gateway = gateway
        self.target_language_name = target_language_name
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.formality = formality

    def select_strategy(self, context: TranslationContext) -> Strategy:
        return select_strategy(context)

    def build_prompt(
        self,
        text: str,
        strategy: Strategy,
        options: Optional[TranslationOptions] = None,
        context: Optional[TranslationContext] = None,
    ) -> str:
        """Assemble the prompt for a strategy.

        Lines, in order: template, optional Context, optional Style,
        optional Language Level, Text. Missing values add no line.

        Args:
            text: Text to translate
            strategy: Selected strategy
            options: Caller options (style, level)
            context: Context consulted for surrounding text

        Returns:
            Prompt string
        """
        options = options or TranslationOptions()
        spec = STRATEGY_PROMPTS[strategy]

        lines: List[str] = [spec.template.format(language=self.target_language_name)]
        if spec.uses_context and context is not None and context.surrounding_text:
            lines.append(f"Context: {context.surrounding_text}")
        if options.style:
            lines.append(f"Style: {options.style}")
        if options.level:
            lines.append(f"Language Level: {options.level}")
        lines.append(f"Text: {text}")

        return "\n".join(lines)

    async def translate(
        self,
        text: str,
        context: TranslationContext,
        options: Optional[TranslationOptions] = None,
    ) -> str:
        """Translate text with the strategy the context calls for.

        Provider errors propagate unchanged.
        """
        strategy = self.select_strategy(context)
        prompt = self.build_prompt(text, strategy, options, context)
        logger.debug("Routing text to strategy=%s", strategy.value)

        response = await self.gateway.translate(
            ProviderRequest(
                text=prompt,
                source_lang=self.source_lang,
                target_lang=self.target_lang,
                formality=self.formality,
            )
        )
        return response.translated_text
