from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from ..engines.types import DAYS_PER_YEAR, ClimateSeries, Location, Parameter
from ..exceptions import AnalysisFailure
from ..metrics import insights_fallbacks_total
from ..synthetic import SyntheticSeriesGenerator
from .types import Domain, Insight

logger = logging.getLogger(__name__)

InsightT = TypeVar("InsightT", bound=Insight)


class InsightAnalyzer(ABC, Generic[InsightT]):
    """Turn a climate series into a scored insight for one domain.

    `analyze` never raises for a bad series: failures fall back to the
    default analysis, computed from a freshly generated synthetic series.
    """

    domain: ClassVar[Domain]
    parameters: ClassVar[tuple[Parameter, ...]]
    span_years: ClassVar[int]
    synthetic_span_years: ClassVar[int]
    confidence_ceiling: ClassVar[float] = 100.0
    synthetic_confidence: ClassVar[float] = 85.0

    def __init__(
        self, generator: SyntheticSeriesGenerator | None = None
    ) -> None:
        self.generator = generator or SyntheticSeriesGenerator()

    def analyze(self, series: ClimateSeries, location: Location) -> InsightT:
        try:
            return self.compute(series, location)
        except (AnalysisFailure, ArithmeticError, ValueError) as exc:
            logger.warning(
                "insights.analyze.fallback domain=%s location=%s err=%s",
                self.domain,
                location.name,
                exc,
            )
            insights_fallbacks_total.labels(
                domain=self.domain, stage="analysis"
            ).inc()
            return self.default_analysis(location)

    def default_analysis(self, location: Location) -> InsightT:
        series = self.synthetic_series(location)
        return self.compute(series, location)

    def synthetic_series(self, location: Location) -> ClimateSeries:
        return self.generator.generate(
            location.region, self.parameters, self.synthetic_span_years
        )

    def confidence(self, series: ClimateSeries) -> float:
        if series.synthetic:
            return self.synthetic_confidence
        expected = DAYS_PER_YEAR * series.span_years
        coverage = min(100.0, series.data_points / expected * 100)
        return round(min(self.confidence_ceiling, coverage), 1)

    @abstractmethod
    def compute(self, series: ClimateSeries, location: Location) -> InsightT:
        """Build the insight; may raise on an unusable series."""
