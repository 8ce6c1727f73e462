"""Recover the analysis JSON from the model's text reply."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterable

from pydantic import ValidationError

from .errors import InvalidResponseFormatError, NoTextResponseError
from .models import AnalysisPayload

LOGGER = logging.getLogger(__name__)

FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def extract_text(blocks: Iterable[Dict[str, Any]]) -> str:
    for block in blocks or []:
        if isinstance(block, dict) and block.get("type") == "text":
            return str(block.get("text") or "")
    raise NoTextResponseError()


def extract_json(text: str) -> Any:
    """Parse the first fenced block if there is one, otherwise the whole text."""
    candidate = text
    match = FENCED_BLOCK.search(text)
    if match and match.group(1):
        candidate = match.group(1)
    try:
        return json.loads(candidate.strip(), parse_constant=_reject_constant)
    except ValueError as exc:
        LOGGER.error("Failed to parse AI response: %s", text)
        raise InvalidResponseFormatError() from exc


def parse_analysis(text: str) -> AnalysisPayload:
    data = extract_json(text)
    if not isinstance(data, dict):
        LOGGER.error("AI response is not a JSON object: %s", text)
        raise InvalidResponseFormatError()
    try:
        return AnalysisPayload.model_validate(data)
    except ValidationError as exc:
        LOGGER.error("AI response has unexpected structure (%s): %s", exc, text)
        raise InvalidResponseFormatError() from exc
