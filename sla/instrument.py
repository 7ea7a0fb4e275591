"""
Flask view wrappers that record request metrics, composed as

    in-flight gauge -> duration histogram -> code/method counter -> view

Each wrapper observes the request exactly once, whether the view returns a
normal response, an error response, or raises.
"""

import functools
import time

from flask import current_app, request
from werkzeug.exceptions import HTTPException


def _status_of(exc):
    if isinstance(exc, HTTPException) and exc.code is not None:
        return exc.code
    return 500


def instrument_in_flight(recorder, view):
    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        recorder.inc_in_flight()
        try:
            return view(*args, **kwargs)
        finally:
            recorder.dec_in_flight()
    return wrapper


def instrument_duration(recorder, handler, view):
    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            response = current_app.make_response(view(*args, **kwargs))
        except Exception as e:
            recorder.observe_duration(handler, _status_of(e), request.method,
                                      time.perf_counter() - start)
            raise
        recorder.observe_duration(handler, response.status_code, request.method,
                                  time.perf_counter() - start)
        return response
    return wrapper


def instrument_counter(recorder, view):
    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        try:
            response = current_app.make_response(view(*args, **kwargs))
        except Exception as e:
            recorder.inc_count(_status_of(e), request.method)
            raise
        recorder.inc_count(response.status_code, request.method)
        return response
    return wrapper


def instrument_chain(recorder, handler, view):
    return instrument_in_flight(
        recorder,
        instrument_duration(
            recorder, handler,
            instrument_counter(recorder, view)))
