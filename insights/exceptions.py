"""Error taxonomy for the insight pipeline.

Upstream errors are raised by providers and absorbed by the assembler, which
switches to synthetic data. Analysis failures are absorbed by the analyzers,
which switch to a default analysis. Neither reaches the HTTP layer.
"""

from __future__ import annotations


class InsightError(Exception):
    """Base class for insight pipeline errors."""


class UpstreamError(InsightError):
    """An upstream provider could not deliver usable data."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class UpstreamTimeout(UpstreamError):
    pass


class UpstreamUnavailable(UpstreamError):
    pass


class UpstreamMalformed(UpstreamError):
    pass


class AnalysisFailure(InsightError):
    """A climate series could not be turned into an analysis."""
