"""API dependencies for settings, translation components and authentication.

Routes receive their collaborators through these providers, so tests can
swap them with ``app.dependency_overrides``.
"""

import logging
import secrets
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException

from hinglish.config import Settings, settings
from hinglish.core.i18n import MessageCatalog
from hinglish.core.translation import (
    ContextAnalyzer,
    GatewayFactory,
    PipelineFactory,
    TranslationGateway,
    TranslationHelper,
    TranslationPipeline,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Authentication Dependencies
# =============================================================================


async def verify_api_token(
    authorization: Annotated[Optional[str], Header()] = None,
    x_api_key: Annotated[Optional[str], Header(alias="X-API-Key")] = None,
) -> bool:
    """Verify API token for translation endpoints.

    Supports two authentication methods:
    1. Authorization: Bearer <token>
    2. X-API-Key: <token>

    If API_AUTH_TOKEN is not set, authentication is disabled.

    Raises:
        HTTPException: 401 if auth is required but token is invalid/missing
    """
    if not settings.api_auth_token:
        return True

    token = None
    if authorization and authorization.startswith("Bearer "):
        token = authorization[7:]
    elif x_api_key:
        token = x_api_key

    if not token:
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Provide Authorization: Bearer <token> or X-API-Key header.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not secrets.compare_digest(token, settings.api_auth_token):
        logger.warning("Invalid API token attempt")
        raise HTTPException(
            status_code=401,
            detail="Invalid authentication token.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return True


# =============================================================================
# Translation Dependencies
# =============================================================================


def get_settings() -> Settings:
    return settings


def get_gateway(
    config: Annotated[Settings, Depends(get_settings)],
) -> TranslationGateway:
    return GatewayFactory.create(config)


def get_pipeline(
    config: Annotated[Settings, Depends(get_settings)],
    gateway: Annotated[TranslationGateway, Depends(get_gateway)],
) -> TranslationPipeline:
    return PipelineFactory.create(config, gateway=gateway)


def get_message_catalog(
    config: Annotated[Settings, Depends(get_settings)],
) -> MessageCatalog:
    return MessageCatalog(locale=config.locale)


def get_translation_helper(
    config: Annotated[Settings, Depends(get_settings)],
    gateway: Annotated[TranslationGateway, Depends(get_gateway)],
    messages: Annotated[MessageCatalog, Depends(get_message_catalog)],
) -> TranslationHelper:
    return TranslationHelper(
        gateway=gateway,
        messages=messages,
        source_lang=config.source_lang,
        target_lang=config.target_lang,
        formality=config.formality,
    )


def get_context_analyzer() -> ContextAnalyzer:
    return ContextAnalyzer()
