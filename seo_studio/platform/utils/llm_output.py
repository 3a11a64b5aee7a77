import json
import re
from typing import Any, Dict

from seo_studio.platform.exceptions import StructuredOutputError

# Opening fence with an optional language tag. A word is a tag only when the
# fence line ends after it, or when it is a known tag glued to the body
# (```json{...}); otherwise it is content and stays.
_KNOWN_TAGS = ("json", "html", "markdown", "md")
_OPENING_FENCE = re.compile(
    r"^```[ \t]*"
    r"(?:[A-Za-z0-9_+-]+[ \t]*(?=\r?\n)"
    r"|(?i:" + "|".join(_KNOWN_TAGS) + r")(?![A-Za-z0-9_+-]))?"
    r"[ \t]*(?:\r?\n)?"
)
_CLOSING_FENCE = re.compile(r"\r?\n?[ \t]*```$")


def clean_model_output(text: str) -> str:
    """
    Strip the code fence a model likes to wrap its answer in.

    Only a leading fence (plus its language tag) and a trailing fence are
    removed; fences inside the body are left alone. Running it again on the
    result is a no-op.
    """
    if not text:
        return ""

    cleaned = text.strip()
    # Nested wrappers (```\n```json ...) peel off one layer per pass
    while cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
        cleaned = cleaned.strip()
    return cleaned


def parse_json_payload(text: str) -> Dict[str, Any]:
    """Clean then decode a JSON object; anything else is a StructuredOutputError."""
    cleaned = clean_model_output(text or "")
    if not cleaned:
        raise StructuredOutputError(
            "Failed to parse JSON payload", details="Payload is empty"
        )

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise StructuredOutputError(
            "Failed to parse JSON payload", details=f"Invalid JSON: {e}"
        ) from e

    if not isinstance(payload, dict):
        raise StructuredOutputError(
            "Failed to parse JSON payload",
            details=f"Expected a JSON object, got {type(payload).__name__}",
        )

    return payload
