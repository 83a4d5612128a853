"""
Load testing module for the createAccount contract.

This package contains the Locust user that runs the contract scenarios under
load and gates the run on error rate and p95 latency.

Usage:
    locust -f tests/load/locustfile.py --host=http://localhost:8080
"""
