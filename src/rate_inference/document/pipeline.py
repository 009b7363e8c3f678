"""Quote-document analysis pipeline.

Takes a sample response from a quoting service, finds the array that most
likely holds the shipping options, suggests a FieldMapping for it and previews
the options that mapping would produce.  The operator reviews (and possibly
overrides) the mapping before it is persisted.
"""

import logging
from typing import Any

from rate_inference.config import DOCUMENT_PREVIEW_OPTIONS
from rate_inference.document.discovery import find_array_candidates, rank_candidates
from rate_inference.document.mapping import build_field_mapping, build_preview
from rate_inference.document.schema import DocumentAnalysis
from rate_inference.document.values import parse_document, value_kind

logger = logging.getLogger(__name__)

NO_CANDIDATE_WARNING = "No array of shipping options found in the document; check that the response contains a list of options"


def analyze_document(document: Any, sample_size: int | None = None) -> DocumentAnalysis:
    """Discover record arrays in *document* and suggest a mapping for the best one.

    *sample_size* caps the preview (defaults to DOCUMENT_PREVIEW_OPTIONS).
    A document without any record array is not an error: the analysis carries
    every (zero) candidate, no mapping and a warning.
    """
    limit = DOCUMENT_PREVIEW_OPTIONS if sample_size is None else sample_size
    root_kind = value_kind(document)

    ranked = rank_candidates(find_array_candidates(document))
    if not ranked:
        logger.warning("%s (root kind %s)", NO_CANDIDATE_WARNING, root_kind.value)
        return DocumentAnalysis(root_kind=root_kind, warning=NO_CANDIDATE_WARNING)

    best = ranked[0]
    mapping = build_field_mapping(best)
    preview = build_preview(document, mapping, limit)
    logger.info(
        "Best candidate %r (score %d, %d records) of %d; preview %d option(s)",
        best.path,
        best.score,
        best.length,
        len(ranked),
        len(preview),
    )
    return DocumentAnalysis(
        root_kind=root_kind,
        candidates=tuple(ranked),
        best=best,
        suggested_mapping=mapping,
        preview=tuple(preview),
    )


def analyze_document_text(text: str, sample_size: int | None = None) -> DocumentAnalysis:
    """Parse quote-document *text* and analyze it.

    Raises:
        DocumentParseError: the text is not a valid document (carries the parser's message).
    """
    return analyze_document(parse_document(text), sample_size)
