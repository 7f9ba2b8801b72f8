"""Text Generation Client: verifies text extraction and SDK error mapping.

Invariants:
    - Text blocks concatenated, other block types ignored
    - Timeout / connection / HTTP status errors -> TextGenerationError with type
    - SDK retries disabled
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import anthropic
import httpx
import pytest

from recordbook.core.errors import TextGenerationError
from recordbook.infrastructure.text_generation_client import TextGenerationClient

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


@pytest.fixture
def client():
    return TextGenerationClient(api_key="sk-ant-test", model="test-model")


def _response(*blocks):
    return SimpleNamespace(
        content=list(blocks),
        usage=SimpleNamespace(input_tokens=10, output_tokens=5),
    )


def test_sdk_retries_disabled(client):
    assert client.client.max_retries == 0


async def test_generate_joins_text_blocks(client):
    client.client.messages.create = AsyncMock(return_value=_response(
        SimpleNamespace(type="text", text="SELECT "),
        SimpleNamespace(type="tool_use", name="x"),
        SimpleNamespace(type="text", text="1;"),
    ))

    assert await client.generate("prompt") == "SELECT 1;"
    kwargs = client.client.messages.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]


async def test_generate_empty_content(client):
    client.client.messages.create = AsyncMock(return_value=_response())
    assert await client.generate("prompt") == ""


@pytest.mark.parametrize("exc, error_type", [
    (anthropic.APITimeoutError(request=_REQUEST), "timeout"),
    (anthropic.APIConnectionError(request=_REQUEST), "connection_error"),
    (
        anthropic.InternalServerError(
            "server error",
            response=httpx.Response(500, request=_REQUEST),
            body=None,
        ),
        "http_status",
    ),
])
async def test_generate_maps_errors(client, exc, error_type):
    client.client.messages.create = AsyncMock(side_effect=exc)

    with pytest.raises(TextGenerationError) as exc_info:
        await client.generate("prompt")

    assert exc_info.value.api_error_type == error_type
