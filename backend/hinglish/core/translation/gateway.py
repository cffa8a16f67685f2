"""Provider gateway for translation calls.

This module provides an abstract gateway interface for the translation
provider, with an HTTP implementation (plain JSON endpoint via httpx) and
an LLM implementation via LiteLLM.

The HTTP client, timeout and credential are constructor arguments; no
module-level state is involved in a call.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from litellm import acompletion
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from hinglish.config import Settings

from .errors import ProviderError, ProviderTimeoutError
from .models.provider import ProviderRequest, ProviderResponse

logger = logging.getLogger(__name__)


class TranslationGateway(ABC):
    """Abstract gateway for translation providers.

    Failures surface as ProviderError (with the HTTP status when there is
    one) or ProviderTimeoutError. Retries, if configured, happen here and
    nowhere else.
    """

    RETRY_WAIT = wait_exponential(multiplier=1, min=1, max=10)

    def __init__(self, max_retries: int = 0):
        self.max_retries = max_retries

    @property
    @abstractmethod
    def provider(self) -> str:
        """Get provider name."""

    @abstractmethod
    async def _send(self, request: ProviderRequest) -> ProviderResponse:
        """Make a single provider call."""

    async def translate(self, request: ProviderRequest) -> ProviderResponse:
        """Call the provider, retrying transport failures if configured.

        Args:
            request: Provider request body

        Returns:
            ProviderResponse with translated text
        """
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=self.RETRY_WAIT,
            retry=retry_if_exception_type(ProviderError),
            reraise=True,
        ):
            with attempt:
                return await self._send(request)


class HttpTranslationGateway(TranslationGateway):
    """Gateway for a JSON translation endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str],
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        max_retries: int = 0,
    ):
        """Initialize HTTP gateway.

        Args:
            api_url: Translation endpoint URL
            api_key: Bearer credential
            timeout: Client-side deadline in seconds
            client: Optional shared client (a new one is opened per call otherwise)
            max_retries: Transport retries after the first attempt
        """
        super().__init__(max_retries=max_retries)
        self._api_url = api_url
        self._api_key = api_key
        self._timeout = timeout
        self._client = client

    @property
    def provider(self) -> str:
        return "http"

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def _send(self, request: ProviderRequest) -> ProviderResponse:
        start_time = time.time()
        logger.info("[Provider Gateway] POST %s", self._api_url)

        try:
            if self._client is not None:
                response = await self._post(self._client, request)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, request)
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(
                f"Request timed out after {self._timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Transport error: {e}") from e

        if not response.is_success:
            raise ProviderError(response.text, status_code=response.status_code)

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info("[Provider Gateway] Response %d in %dms", response.status_code, latency_ms)

        try:
            return ProviderResponse.model_validate(response.json())
        except ValueError as e:
            raise ProviderError(f"Invalid response body: {e}") from e

    async def _post(
        self, client: httpx.AsyncClient, request: ProviderRequest
    ) -> httpx.Response:
        return await client.post(
            self._api_url,
            json=request.model_dump(),
            headers=self._headers(),
            timeout=httpx.Timeout(self._timeout),
        )


class LiteLLMTranslationGateway(TranslationGateway):
    """Gateway that sends the prompt to a chat model through LiteLLM."""

    def __init__(
        self,
        model: str,
        api_key: Optional[str],
        timeout: float = 10.0,
        base_url: Optional[str] = None,
        max_retries: int = 0,
    ):
        super().__init__(max_retries=max_retries)
        self._model = model
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = base_url

    @property
    def provider(self) -> str:
        return "litellm"

    async def _send(self, request: ProviderRequest) -> ProviderResponse:
        kwargs = {
            "model": self._model,
            "messages": [{"role": "user", "content": request.text}],
            "temperature": 0.3,
            "api_key": self._api_key,
        }
        if self._base_url:
            kwargs["api_base"] = self._base_url

        logger.info("[Provider Gateway] Calling LiteLLM: model=%s", self._model)

        try:
            response = await asyncio.wait_for(
                acompletion(**kwargs), timeout=self._timeout
            )
        except asyncio.TimeoutError as e:
            raise ProviderTimeoutError(
                f"Request timed out after {self._timeout}s"
            ) from e
        except Exception as e:
            raise ProviderError(
                str(e), status_code=getattr(e, "status_code", None)
            ) from e

        content = response.choices[0].message.content or ""
        return ProviderResponse(translated_text=content.strip())


class GatewayFactory:
    """Factory for creating translation gateways."""

    PROVIDERS = ("http", "litellm")

    @classmethod
    def create(
        cls,
        config: Settings,
        client: Optional[httpx.AsyncClient] = None,
    ) -> TranslationGateway:
        """Create a gateway for the configured provider.

        Args:
            config: Application settings
            client: Optional shared HTTP client for the HTTP gateway

        Returns:
            Configured TranslationGateway

        Raises:
            ValueError: If the provider is not supported
        """
        provider = config.translation_provider.lower()

        if provider == "http":
            return HttpTranslationGateway(
                api_url=config.translation_api_url,
                api_key=config.translation_api_key,
                timeout=config.translation_timeout,
                client=client,
                max_retries=config.max_retries,
            )
        if provider == "litellm":
            return LiteLLMTranslationGateway(
                model=config.litellm_model,
                api_key=config.translation_api_key,
                timeout=config.translation_timeout,
                max_retries=config.max_retries,
            )
        raise ValueError(
            f"Unsupported translation provider: {provider} "
            f"(expected one of {', '.join(cls.PROVIDERS)})"
        )
