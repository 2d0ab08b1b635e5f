"""
Sentiment capability backed by Gemini.

The client is created in setup(), so a missing project or credential fails
AgentBuilder.build() instead of the first patient interaction.
"""

import json
import logging
import re

from google import genai

from care_agent.settings import DEFAULT_MODEL
from care_agent.tools.base import Capability, CapabilityTool

logger = logging.getLogger(__name__)

SENTIMENT_PROMPT = """Classify the emotional tone of this patient message.

Return ONLY valid JSON (no markdown, no explanation):
{{
    "label": "positive|neutral|negative|distressed",
    "score": 0.0
}}

Message: {text}
"""


_FENCE = re.compile(r"^```(?:json)?|```$")


def _load_verdict(text: str) -> dict:
    body = _FENCE.sub("", (text or "").strip()).strip()
    try:
        verdict = json.loads(body)
    except json.JSONDecodeError as e:
        logger.error(f"[SentimentTool] Unreadable model reply: {e}")
        return {}
    return verdict if isinstance(verdict, dict) else {}


def _score(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"[SentimentTool] Non-numeric score {value!r}, using 0")
        return 0.0


class SentimentTool(CapabilityTool):
    capability = Capability.SENTIMENT
    name = "score_sentiment"
    description = "Score the emotional tone of a patient message."

    def __init__(self, project_id: str, location: str = "us-central1", model: str = DEFAULT_MODEL):
        self.project_id = project_id
        self.location = location
        self.model = model
        self._client = None

    def setup(self) -> None:
        if not self.project_id:
            raise ValueError("GOOGLE_CLOUD_PROJECT must be set for the sentiment tool")
        self._client = genai.Client(vertexai=True, project=self.project_id, location=self.location)
        logger.info(f"[SentimentTool] Initialized for project: {self.project_id}")

    async def execute(self, input: str) -> str:
        if self._client is None:
            self.setup()
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=SENTIMENT_PROMPT.format(text=input),
        )
        verdict = _load_verdict(response.text)
        label = verdict.get("label", "unknown")
        score = _score(verdict.get("score", 0.0))
        return f"sentiment {label} (score {score:.2f})"
