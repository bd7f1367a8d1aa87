"""
Google Gemini Provider
Multimodal generation over the Generative Language REST API.
"""

from typing import Any, Dict, List, Optional

from .base import AIProvider, Capability
from ..models import (
    FileDataPart,
    GenerateOptions,
    InlineDataPart,
    Prompt,
    TextPart,
    Vendor,
)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiProvider(AIProvider):
    """
    Gemini adapter.

    The only vendor that accepts binary prompt parts (images, PDFs) and
    the only one able to generate images.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"
    IMAGE_MODEL = "gemini-2.5-flash-preview-image-generation"

    capabilities = frozenset({
        Capability.TEXT,
        Capability.JSON_MODE,
        Capability.MULTIMODAL,
        Capability.LONG_CONTEXT,
        Capability.IMAGES,
    })

    def __init__(self, *args, model: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.model = model or self.DEFAULT_MODEL

    @property
    def name(self) -> Vendor:
        return Vendor.GEMINI

    @property
    def display_name(self) -> str:
        return "Google Gemini"

    @property
    def env_var(self) -> str:
        return "GEMINI_API_KEY"

    def _url(self, model: str) -> str:
        return f"{GEMINI_API_BASE}/{model}:generateContent"

    def _headers(self) -> Dict[str, str]:
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _to_parts(prompt: Prompt) -> List[Dict[str, Any]]:
        if isinstance(prompt, str):
            return [{"text": prompt}]
        parts = []
        for part in prompt:
            if isinstance(part, TextPart):
                parts.append({"text": part.text})
            elif isinstance(part, InlineDataPart):
                parts.append({"inlineData": {"mimeType": part.mime_type, "data": part.data}})
            elif isinstance(part, FileDataPart):
                parts.append({"fileData": {"mimeType": part.mime_type, "fileUri": part.file_uri}})
        return parts

    def _build_payload(self, prompt: Prompt, options: GenerateOptions) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": self._to_parts(prompt)}],
        }
        if options.system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": options.system_prompt}]}

        generation_config: Dict[str, Any] = {}
        if options.temperature is not None:
            generation_config["temperature"] = options.temperature
        if options.max_tokens:
            generation_config["maxOutputTokens"] = options.max_tokens
        if options.wants_json:
            generation_config["responseMimeType"] = "application/json"
        if generation_config:
            payload["generationConfig"] = generation_config
        return payload

    @staticmethod
    def _candidate_parts(data: Dict[str, Any]) -> List[Dict[str, Any]]:
        candidates = data.get("candidates") or []
        if not candidates:
            return []
        content = candidates[0].get("content") or {}
        return content.get("parts") or []

    async def generate_text(
        self,
        prompt: Prompt,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        self._require_key()
        options = options or GenerateOptions()

        response = await self._post(
            self._url(self.model),
            self._build_payload(prompt, options),
            headers=self._headers(),
        )
        self._raise_for_status(response)

        parts = self._candidate_parts(self._json(response))
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

    async def generate_image(self, prompt: str) -> Optional[str]:
        """
        Generate an image from a text prompt.

        Returns:
            ``data:<mime>;base64,<data>`` URL, or None when the response
            carries no image part
        """
        self._require_key()

        response = await self._post(
            self._url(self.IMAGE_MODEL),
            {
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": {"responseModalities": ["TEXT", "IMAGE"]},
            },
            headers=self._headers(),
        )
        self._raise_for_status(response)

        for part in self._candidate_parts(self._json(response)):
            inline = part.get("inlineData") if isinstance(part, dict) else None
            if inline and inline.get("data"):
                mime = inline.get("mimeType", "image/png")
                return f"data:{mime};base64,{inline['data']}"

        self.logger.warning("Gemini image response contained no image data")
        return None

    async def _probe(self) -> None:
        response = await self._post(
            self._url(self.model),
            {
                "contents": [{"role": "user", "parts": [{"text": "Hi"}]}],
                "generationConfig": {"maxOutputTokens": 5},
            },
            headers=self._headers(),
            timeout=self.probe_timeout,
        )
        self._raise_for_status(response)

    def get_info(self) -> dict:
        info = super().get_info()
        info["model"] = self.model
        return info
