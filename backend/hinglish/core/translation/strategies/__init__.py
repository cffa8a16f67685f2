"""Translation strategies.

Strategy selection and prompt templates are data tables; the router
applies them and calls the provider gateway.
"""

from .router import (
    STRATEGY_PROMPTS,
    STRATEGY_RULES,
    StrategyPrompt,
    StrategyRouter,
    select_strategy,
)

__all__ = [
    "STRATEGY_PROMPTS",
    "STRATEGY_RULES",
    "StrategyPrompt",
    "StrategyRouter",
    "select_strategy",
]
