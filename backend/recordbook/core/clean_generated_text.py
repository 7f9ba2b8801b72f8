"""Generated Text Cleanup: strips markdown code fences from model output.

Invariants:
    - strip_all_fences removes every ``` marker (with optional language tag)
    - strip_outer_fence removes only a fence wrapping the whole response,
      so fenced examples inside a Markdown document survive
    - Both return the text trimmed; empty input yields ""
"""

import re

_FENCE_MARKER = re.compile(r"```[A-Za-z0-9_+-]*")
_OUTER_FENCE = re.compile(r"\A\s*```[A-Za-z0-9_+-]*\s*\n(.*?)\n?```\s*\Z", re.DOTALL)


def strip_all_fences(text: str | None) -> str:
    """Remove all fence markers; used for raw SQL."""
    if not text:
        return ""
    return _FENCE_MARKER.sub("", text).strip()


def strip_outer_fence(text: str | None) -> str:
    """Remove a single fence wrapping the entire text; used for documents."""
    if not text:
        return ""
    match = _OUTER_FENCE.match(text)
    return (match.group(1) if match else text).strip()
