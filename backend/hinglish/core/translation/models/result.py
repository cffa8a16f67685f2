"""Translation result models.

This module defines the intermediate and final output structures of the
translation pipeline.
"""

from typing import List

from pydantic import BaseModel, Field

from .context import Domain, SpecialElements, Strategy, Tone


class PreprocessResult(BaseModel):
    """Output of the preprocessing stage."""

    cleaned: str = Field(..., description="Normalized text sent for translation")
    special_elements: SpecialElements = Field(
        default_factory=SpecialElements,
        description="Elements extracted from the original text",
    )
    chunks: List[str] = Field(
        default_factory=list, description="Sentence-like fragments"
    )


class PostprocessResult(BaseModel):
    """Output of the postprocessing stage."""

    text: str = Field(..., description="Translated text with spacing fixed")
    formatting: str = Field(
        ..., description="Translated text with placeholders restored"
    )


class PipelineMetadata(BaseModel):
    """How the pipeline classified and routed the text."""

    domain: Domain
    tone: Tone
    strategy: Strategy


class PipelineResult(BaseModel):
    """Final processed translation output.

    This is the output contract of the translation pipeline.
    """

    translated_text: str = Field(..., description="The translated text")
    confidence: int = Field(
        ..., ge=0, le=100, description="Heuristic confidence between 0 and 100"
    )
    metadata: PipelineMetadata = Field(..., description="Routing metadata")
