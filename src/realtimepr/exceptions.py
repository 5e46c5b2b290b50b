"""realtimepr exception hierarchy.

All public exceptions inherit from RealtimePRError, giving callers a single
base class to catch when they want to handle any realtimepr-specific failure
without swallowing unrelated errors.
"""


class RealtimePRError(Exception):
    """Base exception for all realtimepr errors."""


class InvalidInputError(RealtimePRError):
    """Raised when the text handed to an analyzer is not a string.

    Malformed source code is never an error: unrecognized lines are simply
    left unmatched. Only a missing or non-text input fails a run.
    """


class ManifestUnavailableError(RealtimePRError):
    """Raised when a dependency manifest cannot be read or parsed.

    Callers are expected to degrade gracefully: the manifest-dependent
    checks are skipped and the rest of the analysis still runs.
    """


class RuleError(RealtimePRError):
    """Raised for invalid rule definitions.

    Covers uncompilable regex patterns, unknown severities, and malformed
    custom rule files.
    """


class AnalysisError(RealtimePRError):
    """Raised when a review type is unknown or an analysis pass cannot run."""
