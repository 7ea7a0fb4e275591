from sla.dependency import DependencyOutcome


class FakeClient:
    """Dependency client returning scripted outcomes and remembering the URLs it was asked for."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [DependencyOutcome(200)]
        self.calls = []

    def get(self, url):
        self.calls.append(url)
        return self.outcomes.pop(0)


def count(recorder, code, method="get"):
    return recorder.registry.get_sample_value(
        "requests_total", {"code": str(code), "method": method}) or 0.0


def in_flight(recorder):
    return recorder.registry.get_sample_value("in_flight_requests")
