from __future__ import annotations

from collections.abc import Mapping, Sequence

from .engines.types import DAYS_PER_YEAR, ClimateSeries, Parameter
from .exceptions import AnalysisFailure

MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
DAYS_PER_MONTH = 30.44


def monthly_means(
    series: ClimateSeries, parameters: Sequence[Parameter]
) -> dict[int, dict[Parameter, float]]:
    """Return the mean daily value per calendar month (1-12).

    Daily records from every year are pooled by month. Raises
    `AnalysisFailure` when any month lacks a requested parameter.
    """

    if series.synthetic:
        result = {
            month: {param: values[param] for param in parameters}
            for month, values in series.monthly.items()
            if all(param in values for param in parameters)
        }
    else:
        sums: dict[int, dict[Parameter, float]] = {}
        counts: dict[int, dict[Parameter, int]] = {}
        for day, values in series.daily.items():
            for param in parameters:
                if param not in values:
                    continue
                month_sums = sums.setdefault(day.month, {})
                month_counts = counts.setdefault(day.month, {})
                month_sums[param] = month_sums.get(param, 0.0) + values[param]
                month_counts[param] = month_counts.get(param, 0) + 1
        result = {
            month: {
                param: sums[month][param] / counts[month][param]
                for param in parameters
            }
            for month in sums
            if all(param in counts[month] for param in parameters)
        }

    missing = [month for month in range(1, 13) if month not in result]
    if missing:
        raise AnalysisFailure(
            f"series has no {'/'.join(parameters)} data for months {missing}"
        )
    return dict(sorted(result.items()))


def yearly_values(
    series: ClimateSeries, parameter: Parameter, *, total: bool = False
) -> dict[int, float]:
    """Per-year mean (or annual total) of one parameter over a daily series.

    Years are 365-day windows counted back from `series.end`, keyed by
    `series.end.year` minus the number of windows back. A leftover partial
    window at the start is dropped. Totals are annualized from the daily
    mean so days dropped upstream do not shrink a year.
    """

    if series.start is None or series.end is None:
        return {}
    windows = ((series.end - series.start).days + 1) // DAYS_PER_YEAR
    buckets: dict[int, list[float]] = {}
    for day, values in series.daily.items():
        if parameter not in values:
            continue
        back = (series.end - day).days // DAYS_PER_YEAR
        if 0 <= back < windows:
            buckets.setdefault(back, []).append(values[parameter])
    result: dict[int, float] = {}
    for back, items in sorted(buckets.items(), reverse=True):
        average = sum(items) / len(items)
        annual = average * DAYS_PER_YEAR if total else average
        result[series.end.year - back] = annual
    return result


def mean(values: Mapping[int, float] | Sequence[float]) -> float:
    items = list(values.values()) if isinstance(values, Mapping) else values
    if not items:
        raise AnalysisFailure("cannot average an empty sequence")
    return sum(items) / len(items)
