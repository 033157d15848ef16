"""Core infrastructure: configuration, errors and observability."""
