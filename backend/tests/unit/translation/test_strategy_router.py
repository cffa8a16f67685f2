from itertools import product

import pytest

from hinglish.core.translation import (
    Domain,
    ProviderError,
    Strategy,
    StrategyRouter,
    Tone,
    TranslationContext,
    TranslationOptions,
    select_strategy,
)

from tests.helpers import make_gateway, sent_prompt

FLAGS = ("is_technical", "has_idioms", "has_cultural_references", "requires_context")


def _expected(flags: dict) -> Strategy:
    if flags["is_technical"]:
        return Strategy.TECHNICAL
    if flags["has_idioms"]:
        return Strategy.IDIOMATIC
    if flags["has_cultural_references"]:
        return Strategy.CULTURAL
    if flags["requires_context"]:
        return Strategy.CONTEXTUAL
    return Strategy.DIRECT


class TestSelectStrategy:
    @pytest.mark.parametrize("values", list(product([False, True], repeat=4)))
    def test_priority_order_for_every_flag_combination(self, values):
        flags = dict(zip(FLAGS, values))
        assert select_strategy(TranslationContext(**flags)) == _expected(flags)

    def test_ignores_fields_other_than_flags(self):
        plain = TranslationContext(has_idioms=True)
        decorated = TranslationContext(
            has_idioms=True,
            domain=Domain.MEDICAL,
            tone=Tone.FORMAL,
            terminology=["NewYork"],
            surrounding_text="Earlier paragraph",
        )
        assert select_strategy(plain) == select_strategy(decorated) == Strategy.IDIOMATIC


class TestBuildPrompt:
    @pytest.fixture
    def router(self):
        return StrategyRouter(gateway=make_gateway())

    def test_minimal_prompt_has_template_and_text_only(self, router):
        prompt = router.build_prompt("hello", Strategy.DIRECT, TranslationOptions())
        assert prompt == "Translate this text directly to Hinglish:\nText: hello"

    def test_optional_lines_follow_fixed_order(self, router):
        context = TranslationContext(surrounding_text="We met at the station.")
        options = TranslationOptions(style="casual", level="beginner")

        prompt = router.build_prompt("see you", Strategy.CONTEXTUAL, options, context)

        assert prompt.split("\n") == [
            "Translate this text to Hinglish considering the context:",
            "Context: We met at the station.",
            "Style: casual",
            "Language Level: beginner",
            "Text: see you",
        ]

    def test_direct_and_idiomatic_ignore_surrounding_text(self, router):
        context = TranslationContext(surrounding_text="ignored")
        for strategy in (Strategy.DIRECT, Strategy.IDIOMATIC):
            prompt = router.build_prompt("x", strategy, TranslationOptions(), context)
            assert "Context:" not in prompt

    def test_each_strategy_has_its_own_template(self, router):
        first_lines = {
            router.build_prompt("x", strategy).split("\n")[0] for strategy in Strategy
        }
        assert len(first_lines) == len(Strategy)

    def test_target_language_name_is_configurable(self):
        router = StrategyRouter(gateway=make_gateway(), target_language_name="Hindi")
        prompt = router.build_prompt("x", Strategy.CULTURAL)
        assert prompt.startswith(
            "Translate this text to Hindi while preserving cultural nuances:"
        )


class TestTranslate:
    @pytest.mark.asyncio
    async def test_sends_strategy_prompt_to_gateway(self, router, gateway):
        context = TranslationContext(is_technical=True, has_idioms=True)

        result = await router.translate("restart the server", context, TranslationOptions())

        assert result == "namaste"
        request = gateway.translate.await_args.args[0]
        assert request.source_lang == "en"
        assert request.target_lang == "hi-Latn"
        assert request.formality == "neutral"
        assert sent_prompt(gateway) == (
            "Translate this technical text to Hinglish while maintaining "
            "technical accuracy:\nText: restart the server"
        )

    @pytest.mark.asyncio
    async def test_provider_errors_propagate_unchanged(self):
        error = ProviderError("rate limited", status_code=429)
        router = StrategyRouter(gateway=make_gateway(error=error))

        with pytest.raises(ProviderError) as exc_info:
            await router.translate("hi", TranslationContext())

        assert exc_info.value is error
