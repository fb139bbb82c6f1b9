"""
DesiFit API - Gemini AI Service.

Gemini client for schema-constrained plan generation.
"""

import logging
from typing import Optional, Dict, Any

from google import genai
from google.genai import types

from settings import settings
from app.utils.errors import ConfigurationError, ProviderError


logger = logging.getLogger(__name__)


class GeminiService:
    """
    Gemini API service implementing the plan provider interface.

    One request per call: no retry, no timeout override. Whatever the
    transport imposes is the only limit.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Overrides settings.GEMINI_API_KEY.
            model_name: Overrides settings.GEMINI_MODEL.
            temperature: Overrides settings.GEMINI_TEMPERATURE.
        """
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self.temperature = settings.GEMINI_TEMPERATURE if temperature is None else temperature
        if self.api_key and self.api_key.strip():
            self.client = genai.Client(api_key=self.api_key)
        else:
            self.client = None
        self.logger = logging.getLogger(__name__)

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def generate(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: Dict[str, Any]
    ) -> Optional[str]:
        """
        Request JSON constrained to ``response_schema``.

        Args:
            prompt: Rendered user prompt.
            system_instruction: Fixed persona and rules.
            response_schema: Data-driven schema description.

        Returns:
            Optional[str]: Raw response text, None or empty when the model
            returned nothing.

        Raises:
            ConfigurationError: No API key configured.
            ProviderError: The API call failed.
        """
        if not self.client:
            self.logger.error("Gemini API key not configured")
            raise ConfigurationError()

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=response_schema,
                    system_instruction=system_instruction,
                    temperature=self.temperature
                )
            )
        except Exception as e:
            self.logger.error(f"Plan generation error: {str(e)}")
            raise ProviderError(detail=str(e)) from e

        return response.text
