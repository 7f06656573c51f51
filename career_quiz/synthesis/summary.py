# career_quiz/synthesis/summary.py
# Personalised career summary: a remote chat-completions provider with a
# deterministic local fallback.

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from ..constants import NOT_SPECIFIED
from ..core.config import SummarySettings, summary_settings
from ..riasec.definitions import INTEREST_TYPES, type_name
from ..schemas.quiz import Profile

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a professional career counselor providing personalized career guidance."

GENERIC_SUMMARY = (
    "Based on your RIASEC assessment, you have a unique combination of interests that can lead to a "
    "fulfilling career. Consider exploring careers that align with your top interest areas and leverage "
    "your natural strengths."
)


@dataclass(frozen=True)
class SummaryOutcome:
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return bool(self.text) and self.error is None


class SummaryProvider(Protocol):
    async def generate(self, profile: Profile, code: Optional[str]) -> SummaryOutcome:
        ...


def education_display(education: Optional[str], default: str) -> str:
    return education.replace("_", " ") if education else default


def build_prompt(profile: Profile, code: str) -> str:
    """User prompt for the remote provider. Assumes every letter of code is known."""
    letters = list(code)
    types = [INTEREST_TYPES[letter] for letter in letters]
    age = f"{profile.age} years" if profile.age is not None else NOT_SPECIFIED
    ordinals = ["Top", "Second", "Third"]
    type_lines = "\n".join(
        f"- {ordinal} interest type: {t.name} - {t.description}" for ordinal, t in zip(ordinals, types)
    )
    return (
        "You are a professional career counselor. Generate a personalized 3-4 sentence career summary for "
        "this person based on their RIASEC assessment results.\n\n"
        "Personal Profile:\n"
        f"- Name: {profile.full_name or NOT_SPECIFIED}\n"
        f"- Age: {age}\n"
        f"- Gender: {profile.gender or NOT_SPECIFIED}\n"
        f"- Education: {education_display(profile.education, NOT_SPECIFIED)}\n"
        f"- Occupation: {profile.occupation or NOT_SPECIFIED}\n"
        f"- Location: {profile.location or NOT_SPECIFIED}\n\n"
        "RIASEC Assessment Results:\n"
        f"- Holland Code: {code} ({', '.join(t.name for t in types)})\n"
        f"{type_lines}\n\n"
        "Write a warm, personalized summary that:\n"
        "1. Addresses them by name\n"
        "2. Connects their background (education/occupation) to their results\n"
        "3. Explains what their Holland Code means for their career path\n"
        "4. Gives encouragement about their potential\n\n"
        "Keep it professional but friendly. Write in second person (you/your). Maximum 4 sentences."
    )


class RemoteSummaryProvider:
    """
    One POST to an OpenAI-compatible chat completions endpoint. Never raises;
    every failure is reported through SummaryOutcome.error.
    """

    def __init__(self, settings: SummarySettings = summary_settings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._client = client

    async def generate(self, profile: Profile, code: Optional[str]) -> SummaryOutcome:
        if not self.settings.api_key:
            return SummaryOutcome(error="No API key configured for the summary provider")
        if not code or len(code) != 3 or any(letter not in INTEREST_TYPES for letter in code):
            return SummaryOutcome(error=f"Unusable Holland code {code!r}")

        payload = {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(profile, code)},
            ],
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
            "Accept": "application/json",
        }

        try:
            if self._client is not None:
                response = await self._client.post(
                    self.settings.api_url, json=payload, headers=headers, timeout=self.settings.timeout_seconds
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self.settings.api_url, json=payload, headers=headers, timeout=self.settings.timeout_seconds
                    )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Summary provider returned {e.response.status_code}: {e.response.text[:200]}")
            return SummaryOutcome(error=f"HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.warning(f"Summary provider request failed: {e!r}")
            return SummaryOutcome(error=f"Request error: {type(e).__name__}")
        except ValueError as e:
            logger.warning(f"Summary provider returned invalid JSON: {e}")
            return SummaryOutcome(error="Invalid JSON response")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            logger.warning(f"Unexpected summary provider response shape: {str(data)[:200]}")
            return SummaryOutcome(error="Unexpected response shape")

        text = content.strip() if isinstance(content, str) else ""
        if not text:
            return SummaryOutcome(error="Empty summary text")
        logger.info(f"Remote summary generated for code {code}")
        return SummaryOutcome(text=text)


class FallbackSummaryProvider:
    """Template summary built only from the profile and code. Always succeeds."""

    async def generate(self, profile: Profile, code: Optional[str]) -> SummaryOutcome:
        return SummaryOutcome(text=fallback_summary(profile, code))


def fallback_summary(profile: Profile, code: Optional[str]) -> str:
    if not code:
        return GENERIC_SUMMARY
    name = profile.full_name or "Based on your assessment"
    top_types = ", ".join(type_name(letter) for letter in code)
    education = education_display(profile.education, "your field")
    return (
        f"{name}, your Holland Code {code} reveals strong interests in {top_types} areas. "
        "This unique combination suggests you would excel in careers that blend these interests together. "
        f"Your background in {education} provides a solid foundation for exploring these career paths. "
        "Consider roles that allow you to combine these interests for maximum career satisfaction."
    )


class SummaryGenerator:
    """
    Picks the remote summary when it produced text, otherwise the fallback.
    Never raises and never returns an empty string.
    """

    def __init__(self, remote: Optional[SummaryProvider] = None,
                 fallback: Optional[FallbackSummaryProvider] = None):
        self.remote = remote
        self.fallback = fallback or FallbackSummaryProvider()

    async def generate(self, profile: Profile, code: Optional[str]) -> str:
        if self.remote is not None:
            try:
                outcome = await self.remote.generate(profile, code)
            except Exception as e:
                # Providers report errors through the outcome; this guards third-party ones
                logger.warning(f"Summary provider raised unexpectedly: {e}", exc_info=True)
                outcome = SummaryOutcome(error=str(e))
            if outcome.ok:
                return outcome.text
            logger.warning(f"Using fallback summary: {outcome.error}")
        return (await self.fallback.generate(profile, code)).text


def get_summary_generator() -> SummaryGenerator:
    """FastAPI dependency. The remote provider is skipped when disabled in settings."""
    remote = RemoteSummaryProvider(summary_settings) if summary_settings.enabled else None
    return SummaryGenerator(remote=remote)
