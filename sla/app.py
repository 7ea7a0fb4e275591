#!/usr/bin/env python3
"""
sla: a fault- and latency-injecting HTTP workload.

  ANY /<path>    ?name=<str>&dep=<base64 path>&sleep=<ms>&code=<status>
  GET /metrics   Prometheus scrape endpoint

A request with dep calls http://<Host header><decoded path> first, so a
chain of hops can be built by nesting base64-encoded dep values.
"""
import argparse
import base64
import sys
import time

from flask import Flask, Response, request

from sla.config import ConfigError, load_config
from sla.dependency import (
    DependencyStatusFailure,
    DependencyTransportFailure,
    HttpDependencyClient,
)
from sla.handler import compose_body, execute
from sla.instrument import instrument_chain
from sla.plan import InvalidEncoding, interpret
from sla.prometheus_metrics import PrometheusRecorder


BAD_GATEWAY = 502

# methods answered by the catch-all handler
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def http_error(message, status):
    return Response(message + "\n", status=status, mimetype="text/plain")


def dependency_error_status(status_code):
    return status_code if status_code >= 400 else BAD_GATEWAY


def create_app(recorder, client, sleep=time.sleep):
    app = Flask(__name__)

    def root(_path=""):
        try:
            plan = interpret(request.args)
        except InvalidEncoding as e:
            print(f"[sla] rejected request {request.full_path}: {e}", flush=True)
            return http_error(str(e), 400)

        print(f"[sla] {plan.name} {base64.b64encode(request.full_path.encode()).decode()}", flush=True)

        try:
            result = execute(plan, request.host, client, sleep=sleep)
        except DependencyTransportFailure as e:
            print(f"[sla] {plan.name} {e}", flush=True)
            return http_error(str(e), BAD_GATEWAY)
        except DependencyStatusFailure as e:
            print(f"[sla] {plan.name} {e}", flush=True)
            return http_error("not OK response", dependency_error_status(e.status_code))

        print(f"[sla] name {result.name} dep {result.dependency_path} code {result.status_code} "
              f"slept {result.sleep_ms} ms", flush=True)
        return Response(compose_body(result), status=result.status_code, mimetype="text/plain")

    view = instrument_chain(recorder, "root", root)
    app.add_url_rule("/", "root", view, defaults={"_path": ""}, methods=METHODS)
    app.add_url_rule("/<path:_path>", "root", view, methods=METHODS)
    app.add_url_rule("/metrics", "metrics", recorder.metrics_response)
    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--config", help="optional YAML config file")
    args = parser.parse_args(argv)
    try:
        cfg = load_config(args.config)
    except (ConfigError, OSError) as e:
        parser.error(str(e))

    recorder = PrometheusRecorder()
    recorder.set_build_info(cfg["version"], cfg["branch"])
    app = create_app(recorder, HttpDependencyClient(timeout=cfg["dependency_timeout"]))

    print(f"[sla] Listening on {cfg['host']}:{cfg['port']}", flush=True)
    app.run(host=cfg["host"], port=cfg["port"], threaded=True)


if __name__ == "__main__":
    sys.exit(main())
