"""Test doubles for translation collaborators."""

from typing import Optional
from unittest.mock import AsyncMock, Mock

from hinglish.core.translation import ProviderResponse


def make_gateway(
    translated_text: str = "namaste",
    error: Optional[Exception] = None,
) -> Mock:
    """Create a gateway double whose translate() returns or raises."""
    gateway = Mock()
    if error is not None:
        gateway.translate = AsyncMock(side_effect=error)
    else:
        gateway.translate = AsyncMock(
            return_value=ProviderResponse(translated_text=translated_text)
        )
    return gateway


def sent_prompt(gateway: Mock) -> str:
    """Prompt text of the last request sent to a gateway double."""
    request = gateway.translate.await_args.args[0]
    return request.text
