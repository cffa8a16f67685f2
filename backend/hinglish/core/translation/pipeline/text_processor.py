"""Pre- and post-processing of translation text.

This module provides the TextProcessor class, which prepares source text
before the provider call and cleans up the provider's output afterwards.
"""

import re
from typing import Dict, List, Optional, Pattern

from ..models.context import SpecialElements, TranslationContext
from ..models.result import PostprocessResult, PreprocessResult


class TextProcessor:
    """Prepares text for translation and tidies translated output.

    Responsibilities:
    1. Clean source text and split it into chunks
    2. Extract special elements (numbers, URLs, emails, dates)
    3. Fix spacing around punctuation in translated text
    4. Restore special elements into placeholder tokens
    """

    # Patterns for special elements, applied to the original text
    SPECIAL_ELEMENT_PATTERNS: Dict[str, Pattern[str]] = {
        "numbers": re.compile(r"\d+"),
        "urls": re.compile(r"https?://[^\s]+"),
        "emails": re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
        "dates": re.compile(r"\d{1,2}[-/]\d{1,2}[-/]\d{2,4}"),
    }

    _DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s.,!?-]")
    _WHITESPACE = re.compile(r"\s+")
    _CHUNK_DELIMITERS = re.compile(r"[.!?]+")
    _SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,!?])")
    _SPACE_AFTER_PUNCT = re.compile(r"([.,!?])\s*")

    def preprocess(self, text: str) -> PreprocessResult:
        """Prepare source text for translation.

        Args:
            text: Original source text

        Returns:
            PreprocessResult with cleaned text, special elements and chunks
        """
        return PreprocessResult(
            cleaned=self.clean_text(text),
            special_elements=self.extract_special_elements(text),
            chunks=self.split_into_chunks(text),
        )

    def postprocess(
        self,
        translated: str,
        context: TranslationContext,
        special_elements: Optional[SpecialElements] = None,
    ) -> PostprocessResult:
        """Tidy provider output.

        Args:
            translated: Raw translated text from the provider
            context: Context of the original text
            special_elements: Elements extracted during preprocessing

        Returns:
            PostprocessResult with fixed text and restored formatting
        """
        return PostprocessResult(
            text=self.fix_common_issues(translated),
            formatting=self.restore_formatting(
                translated, special_elements or SpecialElements()
            ),
        )

    def clean_text(self, text: str) -> str:
        """Strip unsupported characters and normalize whitespace.

        Characters are removed before whitespace is collapsed, so a second
        pass never changes the result. Word characters are ASCII only, while
        any Unicode whitespace collapses to a single space.
        """
        text = self._DISALLOWED_CHARS.sub("", text)
        text = self._WHITESPACE.sub(" ", text)
        return text.strip()

    def extract_special_elements(self, text: str) -> SpecialElements:
        return SpecialElements(
            **{
                kind: pattern.findall(text)
                for kind, pattern in self.SPECIAL_ELEMENT_PATTERNS.items()
            }
        )

    def split_into_chunks(self, text: str) -> List[str]:
        """Split on runs of sentence punctuation, dropping blank fragments.

        Fragments keep their leading whitespace.
        """
        return [
            chunk
            for chunk in self._CHUNK_DELIMITERS.split(text)
            if chunk.strip()
        ]

    def fix_common_issues(self, translated: str) -> str:
        # Punctuation passes must run after whitespace collapsing
        text = self._WHITESPACE.sub(" ", translated)
        text = self._SPACE_BEFORE_PUNCT.sub(r"\1", text)
        return self._SPACE_AFTER_PUNCT.sub(r"\1 ", text)

    def restore_formatting(
        self, translated: str, special_elements: SpecialElements
    ) -> str:
        """Replace ``[<kind>]`` placeholders with extracted elements.

        Each element replaces the first remaining placeholder of its kind.
        Text without placeholders is returned unchanged.
        """
        result = translated
        for kind, elements in special_elements.items():
            for element in elements:
                result = result.replace(f"[{kind}]", element, 1)
        return result
