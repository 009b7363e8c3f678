"""Exception hierarchy for table and document ingest.

Every error here is caused by malformed input and is fixed by the operator
correcting the source data (or the mapping) and re-submitting.  Nothing in the
engine retries.  Numeric coercion failures and path-resolution misses are not
exceptions at all: they fall back to 0 or a placeholder.
"""


class RateInferenceError(Exception):
    """Base class for all rate inference errors."""


class FormatError(RateInferenceError):
    """Raised when delimited text lacks a header/data line or has fewer than two columns."""


class EmptyInputError(RateInferenceError):
    """Raised when delimited text has a header but no usable data rows."""


class MappingError(RateInferenceError, ValueError):
    """Raised when a column or field mapping cannot be applied as requested."""


class DocumentParseError(RateInferenceError):
    """Raised when a quote document cannot be decoded.

    ``parser_message`` carries the underlying parser's message verbatim so it
    can be surfaced to the operator; ``line`` / ``column`` are set when the
    parser reports a position.
    """

    def __init__(self, message: str, parser_message: str = "", line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.parser_message = parser_message or message
        self.line = line
        self.column = column


class DocumentTooLargeError(DocumentParseError):
    """Raised when a quote document exceeds the configured size cap."""


class NoCandidateFoundError(RateInferenceError):
    """Raised on demand when a document holds no array of records.

    Analysis itself never raises this; it completes with an empty mapping and a
    warning.  Callers that need a mapping use ``DocumentAnalysis.require_mapping``.
    """
