"""Translation API routes."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from hinglish.api.dependencies import (
    get_context_analyzer,
    get_message_catalog,
    get_pipeline,
    get_translation_helper,
    verify_api_token,
)
from hinglish.core.i18n import MessageCatalog
from hinglish.core.translation import (
    ContextAnalyzer,
    PipelineResult,
    Strategy,
    TranslationContext,
    TranslationHelper,
    TranslationOptions,
    TranslationPipeline,
    TranslationPipelineError,
    calculate_confidence,
    select_strategy,
)
from hinglish.utils.text import is_translatable_text

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_api_token)])


class TranslateRequest(BaseModel):
    """Request to translate a span of text."""
    text: str
    style: Optional[str] = None
    level: Optional[str] = None
    surrounding_text: Optional[str] = None


class TranslateResponse(PipelineResult):
    """Pipeline result plus the original text, for popup rendering."""
    original: str


class QuickTranslateRequest(BaseModel):
    """Request for a direct translation without routing."""
    text: str


class QuickTranslateResponse(BaseModel):
    """Original and translated strings for popup rendering."""
    original: str
    translated: str


class AnalyzeResponse(BaseModel):
    """Analysis of a text without calling the provider."""
    context: TranslationContext
    strategy: Strategy
    confidence: int = Field(..., ge=0, le=100)


def _require_translatable(text: str, messages: MessageCatalog) -> None:
    if not is_translatable_text(text):
        raise HTTPException(
            status_code=422,
            detail=messages.get_message("notTranslatable"),
        )


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    pipeline: Annotated[TranslationPipeline, Depends(get_pipeline)],
    messages: Annotated[MessageCatalog, Depends(get_message_catalog)],
) -> TranslateResponse:
    """Translate text through the full classify/route/reassemble pipeline."""
    _require_translatable(request.text, messages)

    options = TranslationOptions(
        style=request.style,
        level=request.level,
        surrounding_text=request.surrounding_text,
    )
    try:
        result = await pipeline.process(request.text, options)
    except TranslationPipelineError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return TranslateResponse(original=request.text, **result.model_dump())


@router.post("/translate/quick", response_model=QuickTranslateResponse)
async def translate_quick(
    request: QuickTranslateRequest,
    helper: Annotated[TranslationHelper, Depends(get_translation_helper)],
    messages: Annotated[MessageCatalog, Depends(get_message_catalog)],
) -> QuickTranslateResponse:
    """Translate text directly; provider failures come back as a message."""
    _require_translatable(request.text, messages)

    translated = await helper.translate_text(request.text)
    return QuickTranslateResponse(original=request.text, translated=translated)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: QuickTranslateRequest,
    analyzer: Annotated[ContextAnalyzer, Depends(get_context_analyzer)],
) -> AnalyzeResponse:
    """Show how a text would be classified and routed."""
    context = analyzer.analyze(request.text)
    return AnalyzeResponse(
        context=context,
        strategy=select_strategy(context),
        confidence=calculate_confidence(context),
    )
