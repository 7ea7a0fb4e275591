import threading

import pytest
import requests
from prometheus_client import CollectorRegistry
from werkzeug.serving import make_server

from sla.app import create_app
from sla.dependency import HttpDependencyClient
from sla.prometheus_metrics import PrometheusRecorder
from tests.helpers import FakeClient


@pytest.fixture
def recorder():
    return PrometheusRecorder(registry=CollectorRegistry())


@pytest.fixture
def make_app(recorder):
    def _make(client=None, **kwargs):
        app = create_app(recorder, client or FakeClient(), **kwargs)
        app.testing = True
        return app.test_client()
    return _make


@pytest.fixture
def http():
    session = requests.Session()
    session.trust_env = False  # no proxies for loopback traffic
    yield session
    session.close()


@pytest.fixture
def live_server(recorder, http):
    """The real app on a threaded werkzeug server; yields its base URL."""
    app = create_app(recorder, HttpDependencyClient(timeout=5, session=http))
    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        thread.join(timeout=5)
