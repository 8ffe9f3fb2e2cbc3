"""Gemini-backed text generator."""

from google import genai
from google.genai import types

from instalens.providers.base import TextGenerator


class GeminiTextGenerator(TextGenerator):
    """Single-shot text generation with a Gemini model."""

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.5-flash",
        client: genai.Client | None = None,
    ):
        self._client = client or genai.Client(api_key=api_key)
        self.model_name = model_name

    async def generate(self, prompt: str, system_instruction: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(system_instruction=system_instruction),
        )
        return response.text
