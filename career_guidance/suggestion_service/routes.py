import logging

from fastapi import APIRouter, HTTPException
from openai import OpenAIError, RateLimitError

from .llm import complete, get_or_client, parse_suggestions, roadmap_prompt, suggestion_prompt
from .schemas import RoadmapIn, RoadmapOut, SuggestionIn, SuggestionOut

logger = logging.getLogger(__name__)


def _call_llm(prompt: str) -> str:
    client = get_or_client()
    try:
        return complete(client, prompt)
    except RateLimitError:
        raise HTTPException(status_code=429, detail="Rate limited. Please retry in a few seconds.")
    except OpenAIError as e:
        logger.error("LLM provider error: %s", e)
        raise HTTPException(status_code=502, detail=f"LLM provider error: {type(e).__name__}")


def build_router():
    router = APIRouter()

    @router.post("/suggestions", response_model=SuggestionOut)
    def suggestions(payload: SuggestionIn):
        reply = _call_llm(suggestion_prompt(payload.category, payload.grade_level))
        items = parse_suggestions(reply)
        if not items:
            logger.warning("LLM returned no usable suggestions for %s", payload.category)
            raise HTTPException(status_code=502, detail="LLM returned no suggestions")
        return SuggestionOut(suggestions=items)

    @router.post("/roadmap", response_model=RoadmapOut)
    def roadmap(payload: RoadmapIn):
        text = _call_llm(roadmap_prompt(payload.name, payload.interests, payload.grade))
        if not text:
            raise HTTPException(status_code=502, detail="Failed to generate roadmap")
        return RoadmapOut(roadmap=text)

    return router
