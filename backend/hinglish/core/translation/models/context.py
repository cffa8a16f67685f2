"""Translation context models.

This module defines the structured result of analysing a source text,
together with the caller-supplied options that shape the prompt.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Domain(str, Enum):
    """Subject domain detected from keywords."""

    TECHNICAL = "technical"
    MEDICAL = "medical"
    LEGAL = "legal"
    FINANCIAL = "financial"
    GENERAL = "general"


class Tone(str, Enum):
    """Register of the source text."""

    FORMAL = "formal"
    INFORMAL = "informal"
    NEUTRAL = "neutral"


class Strategy(str, Enum):
    """Supported translation strategies."""

    DIRECT = "direct"  # Literal translation
    CONTEXTUAL = "contextual"  # Text leans on surrounding context
    IDIOMATIC = "idiomatic"  # Contains idioms
    TECHNICAL = "technical"  # Keep technical terms accurate
    CULTURAL = "cultural"  # Contains cultural references


class SpecialElements(BaseModel):
    """Substrings extracted before translation, grouped by kind."""

    model_config = ConfigDict(frozen=True)

    numbers: List[str] = Field(default_factory=list, description="Digit runs")
    urls: List[str] = Field(default_factory=list, description="http(s) URLs")
    emails: List[str] = Field(default_factory=list, description="Email addresses")
    dates: List[str] = Field(default_factory=list, description="Numeric dates")

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        """Yield (kind, values) pairs in fixed kind order."""
        for kind in ("numbers", "urls", "emails", "dates"):
            yield kind, getattr(self, kind)


class TranslationContext(BaseModel):
    """Heuristic analysis of a source text.

    Computed once from the original text and never mutated. Stages that
    need a variant (e.g. with surrounding text) work on a copy.
    """

    model_config = ConfigDict(frozen=True)

    domain: Domain = Field(default=Domain.GENERAL, description="Detected domain")
    tone: Tone = Field(default=Tone.NEUTRAL, description="Detected tone")
    terminology: List[str] = Field(
        default_factory=list,
        description="Capitalized compound terms in order of appearance",
    )

    # Risk flags
    requires_context: bool = Field(
        default=False, description="Text contains anaphoric pronouns"
    )
    has_idioms: bool = Field(default=False, description="Text contains idioms")
    has_cultural_references: bool = Field(
        default=False, description="Text contains cultural terms"
    )
    is_technical: bool = Field(
        default=False, description="Text contains technical terms"
    )

    surrounding_text: Optional[str] = Field(
        default=None, description="Caller-supplied surrounding text"
    )


class TranslationOptions(BaseModel):
    """Caller-supplied prompt options. Absent fields add nothing to the prompt."""

    style: Optional[str] = Field(default=None, description="Style hint")
    level: Optional[str] = Field(default=None, description="Target language level")
    surrounding_text: Optional[str] = Field(
        default=None, description="Text around the span being translated"
    )
