import logging
from dataclasses import dataclass
from typing import Literal, Optional

import httpx

from career_guidance.config import SUGGESTION_SERVICE_URL, SUGGESTION_TIMEOUT

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

FALLBACK_SUGGESTIONS: dict[str, list[str]] = {
    "mpc": ["B.Tech Computer Science", "B.Tech Mechanical", "B.Sc Physics"],
    "bipc": ["MBBS", "B.Pharmacy", "B.Sc Biology"],
    "commerce": ["B.Com", "BBA", "CA Foundation"],
    "arts": ["B.A English", "B.A History", "B.Ed"],
    "engineering": ["B.Tech", "BE", "Diploma Engineering"],
    "medical": ["MBBS", "BDS", "BHMS"],
    "management": ["BBA", "B.Com", "Hotel Management"],
}
GENERIC_SUGGESTION = "General degree courses"


@dataclass(frozen=True)
class SuggestionSet:
    category: str
    suggestions: list[str]
    source: Literal["generator", "fallback"]

    @property
    def degraded(self) -> bool:
        return self.source == "fallback"


class SuggestionGenerationFailure(Exception):
    pass


def fallback_suggestions(category: str) -> SuggestionSet:
    courses = FALLBACK_SUGGESTIONS.get(category) or [GENERIC_SUGGESTION]
    return SuggestionSet(category=category, suggestions=list(courses), source="fallback")


def parse_generator_payload(data) -> list[str]:
    if not isinstance(data, dict):
        raise SuggestionGenerationFailure("payload is not an object")
    items = data.get("suggestions")
    if not isinstance(items, list):
        raise SuggestionGenerationFailure("payload has no suggestions list")

    out = [s.strip() for s in items if isinstance(s, str) and s.strip()]
    if not out:
        raise SuggestionGenerationFailure("generator returned no usable suggestions")
    return out[:MAX_SUGGESTIONS]


async def _call_generator(
    client: httpx.AsyncClient, url: str, category: str, grade_level: str, token: Optional[str]
) -> list[str]:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        r = await client.post(url, json={"category": category, "grade_level": grade_level}, headers=headers)
    except httpx.HTTPError as e:
        raise SuggestionGenerationFailure(f"{type(e).__name__}: {e}") from e

    if r.status_code != 200:
        raise SuggestionGenerationFailure(f"generator responded {r.status_code}")

    try:
        data = r.json()
    except ValueError as e:
        raise SuggestionGenerationFailure("generator returned invalid JSON") from e

    return parse_generator_payload(data)


async def resolve_suggestions(
    category: str,
    grade_level: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    url: Optional[str] = None,
    token: Optional[str] = None,
) -> SuggestionSet:
    """
    One attempt at the suggestion generator, then the static table.

    Never raises: a failing generator degrades to FALLBACK_SUGGESTIONS and the
    returned set is marked with source="fallback". `token`, when given, is sent
    to the generator as the bearer token.
    """
    url = url or SUGGESTION_SERVICE_URL

    try:
        if client is not None:
            suggestions = await _call_generator(client, url, category, grade_level, token)
        else:
            async with httpx.AsyncClient(timeout=SUGGESTION_TIMEOUT) as c:
                suggestions = await _call_generator(c, url, category, grade_level, token)
    except SuggestionGenerationFailure as e:
        logger.warning("Suggestion generator failed for %s (%s), using fallback: %s", category, grade_level, e)
        return fallback_suggestions(category)

    return SuggestionSet(category=category, suggestions=suggestions, source="generator")
