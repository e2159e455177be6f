"""Shared cross-cutting helpers: telemetry (logging, tracing).

Used by application, infrastructure and presentation. No business logic.
"""
