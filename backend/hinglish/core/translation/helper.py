"""UI-facing translation helper.

Unlike the pipeline, this helper never raises on provider failure: it
returns a localized fallback string that can be shown to the user as is.
"""

import logging

from hinglish.core.i18n import MessageCatalog

from .errors import ProviderError
from .gateway import TranslationGateway
from .models.provider import ProviderRequest

logger = logging.getLogger(__name__)


class TranslationHelper:
    """Direct provider translation with a localized fallback."""

    FAILED_KEY = "translationFailed"

    def __init__(
        self,
        gateway: TranslationGateway,
        messages: MessageCatalog,
        source_lang: str = "en",
        target_lang: str = "hi-Latn",
        formality: str = "neutral",
    ):
        self.gateway = gateway
        self.messages = messages
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.formality = formality

    async def translate_text(self, text: str) -> str:
        """Translate text as is, without routing or prompt templates.

        Returns the localized "translation failed" message when the provider
        returns nothing, and "<message>: <error>" when the call fails.
        """
        request = ProviderRequest(
            text=text,
            source_lang=self.source_lang,
            target_lang=self.target_lang,
            formality=self.formality,
        )
        try:
            response = await self.gateway.translate(request)
        except ProviderError as e:
            logger.error("Translation error: %s", e)
            return f"{self.messages.get_message(self.FAILED_KEY)}: {e}"

        return response.translated_text or self.messages.get_message(self.FAILED_KEY)
