"""Fault- and latency-injecting HTTP workload for exercising observability tooling."""

__version__ = "0.1.0"
