"""
LLM Client Utils - Generated Text.

Cleanup applied to generated text before it is shown to a user.
"""

from .citations import (
    CitationStripResult,
    has_citation_markup,
    strip_citation_markup,
    strip_citations,
)

__all__ = [
    "CitationStripResult",
    "has_citation_markup",
    "strip_citation_markup",
    "strip_citations",
]
