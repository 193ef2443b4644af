"""
Chat Service
Site assistant backed by Gemini
"""

import logging
from typing import List, Optional
from google import genai
from google.genai import types
from highfive.config import settings
from highfive.client.errors import ExternalServiceFailure

logger = logging.getLogger(__name__)

COMPANY_CONTEXT = """HighFive Enterprises is a technology consultancy building websites,
web applications and brand identities for businesses.
Services: Web Development (static and dynamic sites, database-driven web
applications, responsive design, performance optimization) and Logo Design
(custom logos, multiple concepts and revisions, brand identity, full copyright).
Site pages: Home, Services, Projects, Team, Events, Our Network, Contact, Apply.
Working hours: Mon-Fri, 9:00-18:00 IST."""


def system_instruction(team_email: str) -> str:
    return (
        "You are a helpful assistant for HighFive Enterprises. Only answer questions "
        "about HighFive Enterprises: its website, services, team, projects, events or "
        "other company topics. For anything else, politely decline and suggest "
        f"contacting the team directly at {team_email}.\n\n"
        f"Website context:\n{COMPANY_CONTEXT}"
    )


def fallback_reply(team_email: str) -> str:
    return (
        "Sorry, I'm having trouble connecting to the AI service right now. "
        f"Please try again later or contact us directly at {team_email}."
    )


class ChatService:
    """Single-attempt Gemini generation with a fixed fallback reply"""

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None, client=None):
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise ExternalServiceFailure("Gemini API key is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction(settings.TEAM_EMAIL),
            temperature=0.5,
            top_p=0.95,
            top_k=64,
            max_output_tokens=8192,
        )

    async def generate(self, prompt: str) -> str:
        """
        Send one prompt to the model

        Raises:
            ExternalServiceFailure: on any SDK/transport error or an empty reply
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name, contents=prompt, config=self.config()
            )
        except ExternalServiceFailure:
            raise
        except Exception as e:
            raise ExternalServiceFailure(f"Gemini request failed: {e}") from e

        text = (getattr(response, "text", None) or "").strip()
        if not text:
            raise ExternalServiceFailure("Gemini returned an empty reply")
        return text

    async def reply(self, messages: List[dict]) -> dict:
        """
        Answer the latest user message of a conversation

        Returns:
            {"reply": text, "fallback": bool}; fallback is True when the
            model could not be reached
        """
        prompt = ""
        for message in reversed(messages):
            if message.get("role") == "user":
                prompt = (message.get("content") or "").strip()
                break

        if not prompt:
            return {"reply": fallback_reply(settings.TEAM_EMAIL), "fallback": True}

        try:
            return {"reply": await self.generate(prompt), "fallback": False}
        except ExternalServiceFailure as e:
            logger.warning("Chat fell back: %s", e.message)
            return {"reply": fallback_reply(settings.TEAM_EMAIL), "fallback": True}


# Create singleton instance
chat_service = ChatService()
