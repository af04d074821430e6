"""Payloads returned by the /health/live and /health/ready endpoints."""
