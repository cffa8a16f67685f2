"""Context analyzer for source text.

This module provides the ContextAnalyzer class that inspects raw text with
small fixed rule tables and produces a TranslationContext.
"""

import re
from typing import List, Pattern, Tuple

from ..models.context import Domain, Tone, TranslationContext

# Ordered (label, pattern) tables; the first matching row wins.
DOMAIN_RULES: Tuple[Tuple[Domain, Pattern[str]], ...] = (
    (Domain.TECHNICAL, re.compile(r"code|program|software|computer|system", re.I)),
    (Domain.MEDICAL, re.compile(r"patient|doctor|hospital|medicine|treatment", re.I)),
    (Domain.LEGAL, re.compile(r"law|legal|contract|agreement|court", re.I)),
    (Domain.FINANCIAL, re.compile(r"money|bank|finance|investment|stock", re.I)),
)

TONE_RULES: Tuple[Tuple[Tone, Pattern[str]], ...] = (
    (Tone.FORMAL, re.compile(r"please|kindly|would you|could you|thank you", re.I)),
    (Tone.INFORMAL, re.compile(r"hey|hi|thanks|cool|awesome", re.I)),
)

TERMINOLOGY_PATTERN = re.compile(r"[A-Z][a-z]+(?:[A-Z][a-z]+)+")

# Plain substring containment, case-sensitive ("it" also hits "with")
CONTEXT_PRONOUNS = ("it", "this", "that", "they")

# Matched against lowercased text
IDIOMS = (
    "piece of cake",
    "break a leg",
    "hit the road",
    "cost an arm and a leg",
)

CULTURAL_TERMS = (
    "holiday",
    "festival",
    "tradition",
    "custom",
    "celebration",
)

TECHNICAL_TERMS = (
    "algorithm",
    "function",
    "variable",
    "database",
    "server",
    "client",
    "api",
    "protocol",
)


class ContextAnalyzer:
    """Builds a TranslationContext from raw text.

    Every check is a pure function of the text. There are no failure modes:
    any string, including an empty one, produces a context.
    """

    def analyze(self, text: str) -> TranslationContext:
        """Analyze text and return its context.

        Args:
            text: Original (uncleaned) source text

        Returns:
            TranslationContext with domain, tone, terminology and risk flags
        """
        return TranslationContext(
            domain=self.detect_domain(text),
            tone=self.detect_tone(text),
            terminology=self.extract_terminology(text),
            requires_context=self.needs_context(text),
            has_idioms=self.contains_idioms(text),
            has_cultural_references=self.has_cultural_references(text),
            is_technical=self.is_technical_content(text),
        )

    def detect_domain(self, text: str) -> Domain:
        for domain, pattern in DOMAIN_RULES:
            if pattern.search(text):
                return domain
        return Domain.GENERAL

    def detect_tone(self, text: str) -> Tone:
        # Formal markers are checked before informal ones
        for tone, pattern in TONE_RULES:
            if pattern.search(text):
                return tone
        return Tone.NEUTRAL

    def extract_terminology(self, text: str) -> List[str]:
        """Collect camel-case compounds like "NewYork", duplicates kept."""
        return TERMINOLOGY_PATTERN.findall(text)

    def needs_context(self, text: str) -> bool:
        return any(pronoun in text for pronoun in CONTEXT_PRONOUNS)

    def contains_idioms(self, text: str) -> bool:
        lowered = text.lower()
        return any(idiom in lowered for idiom in IDIOMS)

    def has_cultural_references(self, text: str) -> bool:
        lowered = text.lower()
        return any(term in lowered for term in CULTURAL_TERMS)

    def is_technical_content(self, text: str) -> bool:
        lowered = text.lower()
        return any(term in lowered for term in TECHNICAL_TERMS)
