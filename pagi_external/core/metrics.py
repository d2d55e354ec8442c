from __future__ import annotations

from prometheus_client import Counter, Histogram

# IMPORTANT: labels are limited to the configured default model (per-call overrides are
# all counted under "override") and a fixed outcome set.
# Never label with prompts, response text or anything derived from credentials.
# outcome is one of: success, http_error, transport_error, malformed_response, aborted.

llm_requests_total = Counter(
    "pagi_llm_requests_total",
    "Total chat-completion requests sent to the LLM provider",
    labelnames=("model", "outcome"),
)

llm_request_duration_seconds = Histogram(
    "pagi_llm_request_duration_seconds",
    "Chat-completion round-trip duration in seconds",
    labelnames=("model",),
    # LLM latencies run from sub-second to tens of seconds
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0),
)


def observe_llm_request(*, model: str, outcome: str, duration_seconds: float) -> None:
    llm_requests_total.labels(model=model, outcome=outcome).inc()
    llm_request_duration_seconds.labels(model=model).observe(duration_seconds)
