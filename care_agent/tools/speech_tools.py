"""
Speech transcoders.

  decode(text) -> text              speech (or a reference to it) to text
  encode(text, language) -> text    text to the user's spoken language

SimulatedTranscoder is the identity in both directions. GeminiTranscoder
transcribes gs:// or https:// audio references with Gemini native audio and
translates non-English output; its failures surface as CollaboratorError.
"""

import logging

from google import genai
from google.genai import types as genai_types

from care_agent.errors import CollaboratorError
from care_agent.settings import DEFAULT_MODEL

logger = logging.getLogger(__name__)

TRANSCRIPTION_PROMPT = "Transcribe this audio recording verbatim. Return only the transcript text."

TRANSLATION_PROMPT = """Translate the following hospital assistant reply into the language with code '{language}'.
Return only the translation.

Reply: {text}
"""


class SimulatedTranscoder:
    def setup(self) -> None:
        pass

    async def decode(self, text: str) -> str:
        return text

    async def encode(self, text: str, language: str) -> str:
        return text


class GeminiTranscoder:
    def __init__(self, project_id: str, location: str = "us-central1", model: str = DEFAULT_MODEL):
        self.project_id = project_id
        self.location = location
        self.model = model
        self._client = None

    def setup(self) -> None:
        if not self.project_id:
            raise ValueError("GOOGLE_CLOUD_PROJECT must be set for voice mode")
        self._client = genai.Client(vertexai=True, project=self.project_id, location=self.location)
        logger.info(f"[Speech] Initialized for project: {self.project_id}")

    async def decode(self, text: str) -> str:
        if not text.startswith(("gs://", "https://")):
            return text

        logger.info(f"[Speech] Transcribing: {text}")
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=[
                    TRANSCRIPTION_PROMPT,
                    genai_types.Part.from_uri(file_uri=text, mime_type="audio/wav"),
                ],
            )
        except Exception as e:
            raise CollaboratorError("speech decoder", str(e)) from e
        return (response.text or "").strip()

    async def encode(self, text: str, language: str) -> str:
        if (language or "en").lower().startswith("en"):
            return text

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=TRANSLATION_PROMPT.format(language=language, text=text),
            )
        except Exception as e:
            raise CollaboratorError("speech encoder", str(e)) from e
        return (response.text or "").strip()
