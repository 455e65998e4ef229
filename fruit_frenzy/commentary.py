"""Post-game commentary from a chat model, with fixed fallbacks.

The service is optional: without an API key the player gets a static line,
and any failure while calling the model is logged and replaced by another
static line. Nothing here feeds back into the game state.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor

from dotenv import load_dotenv
from openai import OpenAI

from .entities import ScoreSummary

logger = logging.getLogger(__name__)

BASIC_FALLBACK = "Great job! (Enable API Key for AI commentary)"
UNAVAILABLE_FALLBACK = "Well played! (AI unavailable currently)"
SPEECHLESS = "You played so well, I'm speechless!"

CHAT_MODEL = "gpt-4o-mini"
TEMPERATURE = 0.8

PROMPT_TEMPLATE = """I just played a simple fruit catching game.
Here are my stats:
- Score: {score}
- Fruits Caught: {caught}
- Fruits Missed: {missed}

Act as a witty, slightly sarcastic, but encouraging game announcer.
Give me a 1-sentence rank (e.g., "Rank: Fruit Ninja Master") and a short 1-2 sentence comment on my performance.
Keep it fun and under 50 words total."""


class CommentaryService:
    """Wraps an OpenAI client. ``client=None`` means unconfigured."""

    def __init__(self, client: OpenAI | None = None, model: str = CHAT_MODEL) -> None:
        self.client = client
        self.model = model

    @classmethod
    def from_env(cls) -> "CommentaryService":
        """Build from OPENAI_API_KEY (a .env file in the working directory is honoured)."""
        load_dotenv()
        api_key = os.getenv("OPENAI_API_KEY")
        model = os.getenv("FRUIT_FRENZY_COMMENTARY_MODEL", CHAT_MODEL)
        if not api_key:
            logger.info("OPENAI_API_KEY not set; commentary uses the built-in line")
            return cls(None, model)
        try:
            client = OpenAI(api_key=api_key)
        except Exception:
            logger.exception("Failed to initialize OpenAI client")
            return cls(None, model)
        return cls(client, model)

    @property
    def configured(self) -> bool:
        return self.client is not None

    def generate(self, score: int, caught: int, missed: int) -> str:
        if self.client is None:
            return BASIC_FALLBACK
        prompt = PROMPT_TEMPLATE.format(score=score, caught=caught, missed=missed)
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=TEMPERATURE,
            )
            text = resp.choices[0].message.content
        except Exception:
            logger.exception("Error generating commentary")
            return UNAVAILABLE_FALLBACK
        return (text or "").strip() or SPEECHLESS


class CommentaryRequest:
    """One background ``generate`` call tied to the session that asked for it."""

    def __init__(self, future: Future, session_id: int) -> None:
        self.future = future
        self.session_id = session_id

    def cancel(self) -> None:
        self.future.cancel()

    def result_for(self, session_id: int) -> str | None:
        """Finished text for ``session_id``; None while pending or if stale."""
        if session_id != self.session_id or not self.future.done() or self.future.cancelled():
            return None
        return self.future.result()


class Commentator:
    """Runs commentary requests off the frame loop, one at a time."""

    def __init__(self, service: CommentaryService, executor: ThreadPoolExecutor | None = None) -> None:
        self.service = service
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="commentary")
        self.pending: CommentaryRequest | None = None

    def request(self, summary: ScoreSummary, session_id: int) -> CommentaryRequest:
        self.discard()
        future = self.executor.submit(self.service.generate, summary.score, summary.caught, summary.missed)
        self.pending = CommentaryRequest(future, session_id)
        return self.pending

    def discard(self) -> None:
        """Drop the outstanding request; a late result will never be shown."""
        if self.pending is not None:
            self.pending.cancel()
            self.pending = None

    def poll(self, session_id: int) -> str | None:
        if self.pending is None:
            return None
        return self.pending.result_for(session_id)

    def shutdown(self) -> None:
        self.discard()
        self.executor.shutdown(wait=False, cancel_futures=True)
