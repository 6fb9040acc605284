"""
Removal of model-emitted citation markup from generated text.

Two forms are recognized:

- private-use blocks: U+E200 "cite" ... U+E201, deleted entirely
- angle tags: <cite|payload|>, replaced by the payload

Text without markup is returned as the very same object, so callers can
detect the common no-op case with an identity check.
"""

import re
import threading
from typing import NamedTuple

from ..exceptions import InternalError

PUA_CITATION_PATTERN = r"\ue200cite[\s\S]*?\ue201"
ANGLE_CITATION_PATTERN = r"<cite\|([\s\S]*?)\|>"

# Each pass is linear; nesting beyond this falls back to _drop_delimiters.
MAX_STRIP_PASSES = 8

# Last characters must be distinct.
_DELIMITER_TOKENS = ("\ue200cite", "<cite|", "|>")

_patterns: tuple[re.Pattern[str], re.Pattern[str]] | None = None
_patterns_lock = threading.Lock()


class CitationStripResult(NamedTuple):
    """Sanitized text plus whether anything was removed."""

    text: str
    modified: bool


def _compile(pattern: str, name: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InternalError(f"invalid {name} citation pattern: {e}") from e


def _citation_patterns() -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Compile both patterns on first use and reuse them afterwards."""
    global _patterns
    if _patterns is None:
        with _patterns_lock:
            if _patterns is None:
                _patterns = (
                    _compile(PUA_CITATION_PATTERN, "private-use"),
                    _compile(ANGLE_CITATION_PATTERN, "angle"),
                )
    return _patterns


def _strip_once(text: str, pua: re.Pattern[str], angle: re.Pattern[str]) -> str:
    if pua.search(text):
        replaced = pua.sub("", text)
        if angle.search(replaced):
            return angle.sub(r"\1", replaced)
        return replaced
    elif angle.search(text):
        return angle.sub(r"\1", text)
    return text


def _drop_delimiters(text: str) -> str:
    """
    Remove every citation opener and angle closer in a single scan.

    Tokens are popped as soon as they complete at the end of the output, so
    tokens formed by joining the text around a removed one go too. With no
    opener left, neither pattern can match.
    """
    out: list[str] = []
    for char in text:
        out.append(char)
        for token in _DELIMITER_TOKENS:
            size = len(token)
            if char == token[-1] and "".join(out[-size:]) == token:
                del out[-size:]
                break
    return "".join(out)


def strip_citations(text: str) -> CitationStripResult:
    """
    Strip citation markup and report whether the text changed.

    Private-use blocks go first, then angle tags are unwrapped in what is
    left. Passes repeat while they change something, up to MAX_STRIP_PASSES,
    so markup exposed by removing an inner citation is removed as well.
    Markup nested deeper than that has its remaining delimiters dropped in
    one linear scan. Either way the result is stable under a second call.
    """
    pua, angle = _citation_patterns()

    result = text
    for _ in range(MAX_STRIP_PASSES):
        stripped = _strip_once(result, pua, angle)
        if stripped is result:
            break
        result = stripped
    else:
        if pua.search(result) or angle.search(result):
            result = _drop_delimiters(result)

    return CitationStripResult(result, result is not text)


def strip_citation_markup(text: str) -> str:
    """
    Strip model-emitted citation markup so it does not leak into user-visible text.

    Returns the input object itself when there is nothing to strip.
    """
    return strip_citations(text).text


def has_citation_markup(text: str) -> bool:
    """Check whether text contains either citation form."""
    pua, angle = _citation_patterns()
    return bool(pua.search(text) or angle.search(text))
