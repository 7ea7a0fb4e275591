import platform

from flask import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

# 50ms, 100ms, 200ms, 300ms, 500ms
DURATION_BUCKETS = (.05, .1, .2, .3, .5)


class PrometheusRecorder:
    """Process-wide request metrics, written by the instrumentation chain only.

    Every metric lives in the recorder's own registry so the app (and each
    test) gets an isolated set; prometheus_client guards each child value
    with its own lock, so concurrent requests never contend on one lock.
    """

    def __init__(self, registry=None, buckets=DURATION_BUCKETS):
        if registry is None:
            registry = CollectorRegistry()
            ProcessCollector(registry=registry)
            PlatformCollector(registry=registry)
        self.registry = registry

        self.in_flight = Gauge(
            "in_flight_requests",
            "A gauge of requests currently being served by the wrapped handler",
            registry=registry,
        )
        self.requests = Counter(
            "requests", "A counter for requests to the wrapped handler",
            ["code", "method"], registry=registry,
        )
        self.duration = Histogram(
            "request_duration_seconds", "A histogram of latencies for requests.",
            ["handler", "code", "method"], buckets=buckets, registry=registry,
        )
        self.build_info = Gauge(
            "sla_build_info",
            "A metric with a constant '1' value labeled by attributes from which sla was built.",
            ["version", "branch", "pythonversion"], registry=registry,
        )

    def inc_in_flight(self):
        self.in_flight.inc()

    def dec_in_flight(self):
        self.in_flight.dec()

    def observe_duration(self, handler, code, method, seconds):
        self.duration.labels(handler=handler, code=str(code), method=method.lower()).observe(seconds)

    def inc_count(self, code, method):
        self.requests.labels(code=str(code), method=method.lower()).inc()

    def set_build_info(self, version, branch):
        self.build_info.labels(
            version=version, branch=branch, pythonversion=platform.python_version()
        ).set(1)

    def metrics_response(self):
        return Response(generate_latest(self.registry), mimetype=CONTENT_TYPE_LATEST)
