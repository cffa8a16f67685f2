"""Provider request/response models.

These mirror the JSON body exchanged with the translation provider.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProviderRequest(BaseModel):
    """Request body sent to the translation provider."""

    text: str = Field(..., description="Prompt to translate")
    source_lang: str = Field(default="en", description="Source language code")
    target_lang: str = Field(default="hi-Latn", description="Target language code")
    formality: str = Field(default="neutral", description="Requested formality")


class ProviderResponse(BaseModel):
    """Successful provider response."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(
        default="", alias="translatedText", description="Translated text"
    )
