from __future__ import annotations

from prometheus_client import Counter, Histogram

insights_upstream_requests_total = Counter(
    "insights_upstream_requests_total",
    "Total upstream provider requests",
    labelnames=["provider"],
)

insights_upstream_errors_total = Counter(
    "insights_upstream_errors_total",
    "Total upstream provider request errors",
    labelnames=["provider", "error_type"],
)

insights_upstream_latency_seconds = Histogram(
    "insights_upstream_latency_seconds",
    "Latency of upstream provider requests",
    labelnames=["provider"],
    buckets=(0.1, 0.3, 0.5, 1, 2, 5, 10, 15, 20, 30),
)

insights_cache_hits_total = Counter(
    "insights_cache_hits_total",
    "Cache hits for assembled insights",
    labelnames=["domain"],
)

insights_cache_misses_total = Counter(
    "insights_cache_misses_total",
    "Cache misses for assembled insights",
    labelnames=["domain"],
)

insights_fallbacks_total = Counter(
    "insights_fallbacks_total",
    "Pipeline stages answered by fallback data",
    labelnames=["domain", "stage"],
)

insights_assembled_total = Counter(
    "insights_assembled_total",
    "Assembled insight reports",
    labelnames=["domain", "demo"],
)
