from __future__ import annotations
from google import genai


class GeminiChatLLM:
    def __init__(self, api_key: str, model: str):
        self.client = genai.Client(api_key=api_key)
        self.model = model

    async def generate(self, prompt: str) -> str:
        # raw text, unmodified; APIError (with .code) propagates to the retry loop
        res = await self.client.aio.models.generate_content(model=self.model, contents=prompt)
        return res.text or ""
