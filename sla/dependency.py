"""Synthetic downstream calls used to build multi-hop request chains."""

import requests

DEFAULT_TIMEOUT = 30.0


class DependencyTransportFailure(Exception):
    """The dependency could not be reached at all."""

    def __init__(self, url, error):
        super().__init__(f"dependency {url} unreachable: {error}")
        self.url = url
        self.error = error


class DependencyStatusFailure(Exception):
    """The dependency answered, but not with a 2xx."""

    def __init__(self, url, status_code):
        super().__init__(f"dependency {url} returned {status_code}")
        self.url = url
        self.status_code = status_code


class DependencyOutcome:
    def __init__(self, status_code, error=None):
        self.status_code = status_code
        self.error = error

    @property
    def ok(self):
        return self.error is None and 200 <= self.status_code < 300

    def __repr__(self):
        return f"DependencyOutcome(status_code={self.status_code}, error={self.error!r})"


class HttpDependencyClient:
    """One-shot GETs over a shared requests.Session; transport errors come back as outcomes."""

    def __init__(self, timeout=DEFAULT_TIMEOUT, session=None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def get(self, url):
        try:
            with self.session.get(url, timeout=self.timeout) as resp:
                return DependencyOutcome(resp.status_code)
        except requests.RequestException as e:
            return DependencyOutcome(None, e)


def invoke_dependency(client, host, path):
    url = f"http://{host}{path}"
    outcome = client.get(url)
    if outcome.error is not None:
        raise DependencyTransportFailure(url, outcome.error)
    if not 200 <= outcome.status_code < 300:
        raise DependencyStatusFailure(url, outcome.status_code)
    return outcome
