"""Core configuration, errors, formatting and observability."""
