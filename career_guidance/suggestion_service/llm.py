import json
import re

from fastapi import HTTPException
from openai import OpenAI

from career_guidance import config

MAX_SUGGESTIONS = 5

_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


def get_or_client() -> OpenAI:
    api_key = config.openrouter_api_key()
    if not api_key:
        raise HTTPException(status_code=500, detail="OPENROUTER_API_KEY is not set")

    return OpenAI(
        api_key=api_key,
        base_url=config.OPENROUTER_BASE_URL,
        default_headers={
            "HTTP-Referer": config.OPENROUTER_SITE_URL,
            "X-Title": config.OPENROUTER_APP_NAME,
        },
    )


def suggestion_prompt(category: str, grade_level: str) -> str:
    return (
        f"A student who completed class {grade_level or 'unknown'} was matched to the "
        f"'{category}' academic stream. Suggest up to {MAX_SUGGESTIONS} specific degree or "
        "diploma courses available in India for this stream. "
        'Reply with a JSON array of course names only, e.g. ["B.Com", "BBA"].'
    )


def roadmap_prompt(name: str, interests: list[str], grade: str) -> str:
    return (
        f"Generate a personalized career roadmap for {name or 'a student'}, who has grade {grade}.\n"
        f"Their main interests are: {', '.join(interests)}.\n"
        "The roadmap should include:\n"
        "- Suggested career paths\n"
        "- Key skills to learn\n"
        "- Recommended courses/certifications\n"
        "- Roadmap in steps (short-term, mid-term, long-term).\n"
        "Format neatly with clear sections."
    )


def parse_suggestions(text: str) -> list[str]:
    """
    Accepts a JSON array (possibly inside a ``` fence) or a bulleted/numbered list.
    """
    text = (text or "").strip()
    if text.startswith("```"):
        text = text.strip("`")
        text = text.split("\n", 1)[1] if "\n" in text else ""

    start, end = text.find("["), text.rfind("]")
    if start != -1 and end > start:
        try:
            data = json.loads(text[start:end + 1])
        except json.JSONDecodeError:
            data = None
        if isinstance(data, list):
            items = [str(x).strip() for x in data if isinstance(x, (str, int, float)) and str(x).strip()]
            return items[:MAX_SUGGESTIONS]

    items = []
    for line in text.splitlines():
        line = _BULLET_RE.sub("", line).strip()
        if line:
            items.append(line)
    return items[:MAX_SUGGESTIONS]


def complete(client: OpenAI, prompt: str) -> str:
    resp = client.chat.completions.create(
        model=config.OPENROUTER_MODEL,
        messages=[
            {"role": "system", "content": "You are a concise, accurate career counsellor for Indian school students."},
            {"role": "user", "content": prompt},
        ],
    )
    if resp is not None and getattr(resp, "choices", None):
        return (resp.choices[0].message.content or "").strip()
    return ""
