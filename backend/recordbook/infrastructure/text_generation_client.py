"""Text Generation Client: wraps AsyncAnthropic for single-prompt text generation.

Invariants:
    - One user message in, concatenated text blocks out
    - No retry: the SDK's built-in retries are disabled (max_retries=0) and
      every failure is surfaced immediately
    - All SDK failures mapped to TextGenerationError (core/errors.py)

Design Decisions:
    - Wrapper over raw client: callers depend on the TextGenerator protocol,
      tests substitute a fake without touching the SDK
    - APITimeoutError checked before APIConnectionError (it is a subclass)
"""

import logging

import anthropic
from anthropic import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
)

from recordbook.core.errors import TextGenerationError

logger = logging.getLogger(__name__)


class TextGenerationClient:
    """Sends a prompt to the model and returns its text."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 4096,
        timeout_seconds: int = 120,
    ):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model
        self.max_tokens = max_tokens

    async def generate(self, prompt: str) -> str:
        """Return the model's text for prompt (may be empty)."""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except APITimeoutError:
            raise TextGenerationError("API timeout", "timeout")
        except APIConnectionError as e:
            raise TextGenerationError(str(e), "connection_error")
        except APIStatusError as e:
            raise TextGenerationError(
                f"{e.status_code} {e.message}", "http_status",
            )
        except APIError as e:
            raise TextGenerationError(str(e), "client_error")

        usage = response.usage
        logger.info(
            "Text generation success",
            extra={
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )
        return "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )
