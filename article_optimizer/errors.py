"""Error taxonomy for the optimization run.

Recoverable errors (NoResultsError, ModelInvocationError) are caught inside
the fallback loops and turned into "try the next option". Everything else
aborts the run.
"""

from __future__ import annotations


class OptimizerError(Exception):
    """Base class for every pipeline failure."""


class NoArticleError(OptimizerError):
    """The content store has no article to optimize."""


class NoResultsError(OptimizerError):
    """The search provider returned zero items."""


class AllAttemptsFailed(OptimizerError):
    """Every option in an ordered attempt list failed."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = list(errors or [])
        details = "; ".join(self.errors)
        super().__init__(f"{message} ({details})" if details else message)


class SearchUnavailableError(AllAttemptsFailed):
    """Both the search API and the browser fallback failed."""


class InsufficientCandidatesError(OptimizerError):
    """Search produced fewer usable competitor URLs than required."""


class InsufficientReferencesError(OptimizerError):
    """Too few competitor pages could be scraped."""


class ModelInvocationError(OptimizerError):
    """A single model attempt failed (quota, unsupported model, empty output...)."""


class NoModelAvailableError(AllAttemptsFailed):
    """Every configured model identifier failed."""


class PublishRejectedError(OptimizerError):
    """The content store refused the partial update."""
