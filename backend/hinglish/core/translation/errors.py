"""Translation error types."""

from typing import Optional


class TranslationError(Exception):
    """Base class for translation failures."""


class ProviderError(TranslationError):
    """Non-success response or transport failure from the provider."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"API error {status_code}: {message}")
        else:
            super().__init__(message)


class ProviderTimeoutError(ProviderError):
    """Provider call exceeded the client-side deadline."""


class TranslationPipelineError(TranslationError):
    """Any failure inside the pipeline, wrapped at the orchestrator boundary."""

    PREFIX = "Translation failed: "

    def __init__(self, message: str):
        super().__init__(f"{self.PREFIX}{message}")
