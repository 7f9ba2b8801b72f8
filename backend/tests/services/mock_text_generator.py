"""Mock Text Generator: replaces TextGenerationClient in lab and route tests.

Invariants:
    - Sequences pre-configured responses, one per generate() call
    - A response that is an exception instance is raised instead of returned
    - Every prompt is recorded in prompts
"""


class MockTextGenerator:

    def __init__(self, responses):
        self._responses = list(responses)
        self._idx = 0
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self._idx >= len(self._responses):
            raise RuntimeError(
                f"MockTextGenerator: no response at index {self._idx} "
                f"(configured {len(self._responses)})",
            )
        response = self._responses[self._idx]
        self._idx += 1
        if isinstance(response, BaseException):
            raise response
        return response
