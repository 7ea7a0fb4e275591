"""
Request core for GET /: dependency call, injected latency, summary line.

Nothing here touches Flask or metrics; failures surface as exceptions from
sla.dependency and are turned into responses by the view in sla.app.
"""

import time

from sla.dependency import invoke_dependency

DEFAULT_STATUS = 200


class RequestResult:
    def __init__(self, name, elapsed, sleep_ms, dependency_path, status_code):
        self.name = name
        self.elapsed = elapsed  # seconds
        self.sleep_ms = sleep_ms
        self.dependency_path = dependency_path
        self.status_code = status_code

    @property
    def elapsed_ms(self):
        return self.elapsed * 1000.0


def inject_latency(sleep_ms, sleep=time.sleep):
    if sleep_ms > 0:
        sleep(sleep_ms / 1000.0)


def execute(plan, host, client, sleep=time.sleep, clock=time.monotonic):
    start = clock()

    if plan.dependency_path:
        print(f"[sla] {plan.name} fetching dependency: {plan.dependency_path}", flush=True)
        invoke_dependency(client, host, plan.dependency_path)

    inject_latency(plan.sleep_ms, sleep)

    status_code = DEFAULT_STATUS
    if plan.status_code is not None:
        print(f"[sla] Code: {plan.status_code}", flush=True)
        status_code = plan.status_code

    return RequestResult(plan.name, clock() - start, plan.sleep_ms,
                         plan.dependency_path, status_code)


def compose_body(result):
    return (f"Name: {result.name}, Elapsed: {result.elapsed_ms:.3f} ms, "
            f"Slept: {result.sleep_ms} ms, with dep: {result.dependency_path}\n")
