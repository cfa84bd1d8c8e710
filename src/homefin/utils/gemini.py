"""Insight generator backed by the Gemini API."""

import json
import logging
import os
from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from homefin.domain.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

PROMPT_TEMPLATE = (
    "Analyze this monthly household finance summary and provide {count} short, "
    "actionable insights.\n"
    "Data: {data}\n"
    "Format: JSON array of strings."
)


def build_prompt(payload: dict[str, Any], count: int = 3) -> str:
    """Render the prompt sent to the model."""
    return PROMPT_TEMPLATE.format(count=count, data=json.dumps(payload, sort_keys=True))


def parse_insights_response(text: Optional[str]) -> list[str]:
    """Parse the model's JSON answer into a list of tips.

    Accepts a bare JSON array of strings, or an object holding one under
    an ``insights`` key.

    Raises:
        UpstreamError: If the answer is not in the expected shape
    """
    if not text or not text.strip():
        raise UpstreamError("Empty response from insight model")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise UpstreamError(f"Insight model returned invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("insights")
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise UpstreamError("Insight model did not return a list of strings")
    return [item.strip() for item in data if item.strip()]


class GeminiInsightGenerator:
    """Callable generator for InsightAdvisor that asks Gemini for tips."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        count: int = 3,
    ):
        """Initialize the generator.

        Args:
            api_key: Gemini API key; defaults to GEMINI_API_KEY
            model: Model name; defaults to HOMEFIN_GEMINI_MODEL, then DEFAULT_MODEL
            count: Number of tips to ask for
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.model = model or os.environ.get("HOMEFIN_GEMINI_MODEL", DEFAULT_MODEL)
        self.count = count
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        """Get the API client, creating it on first use."""
        if self._client is None:
            if not self.api_key:
                raise UpstreamError("GEMINI_API_KEY is not set")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def __call__(self, payload: dict[str, Any]) -> list[str]:
        client = self._get_client()
        logger.debug("Requesting insights from %s", self.model)
        try:
            response = client.models.generate_content(
                model=self.model,
                contents=build_prompt(payload, self.count),
                config=genai_types.GenerateContentConfig(
                    response_mime_type="application/json",
                ),
            )
        except genai_errors.APIError as e:
            quota = e.code == 429 or e.status == "RESOURCE_EXHAUSTED"
            raise UpstreamError(str(e), quota_exhausted=quota) from e
        return parse_insights_response(response.text)
