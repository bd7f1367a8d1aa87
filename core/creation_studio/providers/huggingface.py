"""
HuggingFace Provider (free Inference API)

Text generation through instruction-tuned models, plus Stable Diffusion
images and sentence embeddings. Cold models answer 503 while loading;
those calls are retried a bounded number of times.
"""

import asyncio
import base64
import json
from typing import Any, Dict, List, Optional

import httpx

from .base import AIProvider, Capability
from ..exceptions import ProviderError
from ..models import GenerateOptions, Prompt, Vendor

HF_API_URL = "https://api-inference.huggingface.co/models"

HF_MODELS = {
    "text": "mistralai/Mistral-7B-Instruct-v0.3",
    "text_alt": "meta-llama/Llama-3.2-3B-Instruct",
    "image": "stabilityai/stable-diffusion-xl-base-1.0",
    "embedding": "sentence-transformers/all-MiniLM-L6-v2",
}

MODEL_LOADING_STATUS = 503


class HuggingFaceProvider(AIProvider):
    """HuggingFace Inference API adapter"""

    DEFAULT_MAX_NEW_TOKENS = 1024
    DEFAULT_TEMPERATURE = 0.7

    capabilities = frozenset({Capability.TEXT, Capability.IMAGES, Capability.EMBEDDINGS})

    def __init__(self, *args, model: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.model = model or HF_MODELS["text"]
        self.loading_retries = self.settings.huggingface_loading_retries
        self.loading_delay = self.settings.huggingface_loading_delay

    @property
    def name(self) -> Vendor:
        return Vendor.HUGGINGFACE

    @property
    def display_name(self) -> str:
        return "HuggingFace (Free)"

    @property
    def env_var(self) -> str:
        return "HUGGINGFACE_API_KEY"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def format_instruction(text: str, system_prompt: Optional[str] = None) -> str:
        """Wrap a prompt in the [INST] template instruction models expect."""
        if system_prompt:
            return f"<s>[INST] {system_prompt}\n\n{text} [/INST]"
        return f"<s>[INST] {text} [/INST]"

    async def _post_model(self, model: str, payload: Dict[str, Any]) -> httpx.Response:
        """POST to a model endpoint, waiting out 503 'model loading' responses."""
        url = f"{HF_API_URL}/{model}"
        for attempt in range(self.loading_retries + 1):
            response = await self._post(url, payload, headers=self._headers())
            if response.status_code != MODEL_LOADING_STATUS:
                break
            if attempt < self.loading_retries:
                self.logger.info(
                    f"HuggingFace model {model} is loading, retrying in {self.loading_delay}s "
                    f"({attempt + 1}/{self.loading_retries})"
                )
                await asyncio.sleep(self.loading_delay)

        self._raise_for_status(response)
        return response

    async def generate_text(
        self,
        prompt: Prompt,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        self._require_key()
        options = options or GenerateOptions()

        payload = {
            "inputs": self.format_instruction(self._text_only(prompt), options.system_prompt),
            "parameters": {
                "max_new_tokens": options.max_tokens or self.DEFAULT_MAX_NEW_TOKENS,
                "temperature": (
                    options.temperature
                    if options.temperature is not None
                    else self.DEFAULT_TEMPERATURE
                ),
                "return_full_text": False,
                "do_sample": True,
            },
        }
        response = await self._post_model(self.model, payload)
        data = self._json(response)

        # Either [{"generated_text": ...}] or {"generated_text": ...}
        if isinstance(data, list):
            first = data[0] if data else {}
            return (first.get("generated_text") if isinstance(first, dict) else "") or ""
        if isinstance(data, dict) and "generated_text" in data:
            return data["generated_text"] or ""
        return json.dumps(data)

    async def generate_image(self, prompt: str) -> str:
        """Generate an image with Stable Diffusion; returns a data URL."""
        self._require_key()

        response = await self._post_model(HF_MODELS["image"], {"inputs": prompt})
        mime = response.headers.get("content-type", "image/jpeg").split(";")[0]
        encoded = base64.b64encode(response.content).decode("ascii")
        return f"data:{mime};base64,{encoded}"

    async def generate_embedding(self, text: str) -> List[float]:
        """Sentence embedding vector for RAG-style lookups."""
        self._require_key()

        response = await self._post_model(HF_MODELS["embedding"], {"inputs": text})
        data = self._json(response)
        if not isinstance(data, list):
            raise ProviderError(
                self.name.value,
                f"HuggingFace embedding error: unexpected response {str(data)[:200]}",
            )
        return data

    async def _probe(self) -> None:
        response = await self._post(
            f"{HF_API_URL}/{self.model}",
            {"inputs": "Hello", "parameters": {"max_new_tokens": 5}},
            headers=self._headers(),
            timeout=self.probe_timeout,
        )
        # A loading model still counts as reachable
        if response.status_code == MODEL_LOADING_STATUS:
            return
        self._raise_for_status(response)

    def get_info(self) -> dict:
        info = super().get_info()
        info["model"] = self.model
        return info
