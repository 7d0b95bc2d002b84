"""Ingest, transform, and emit orchestration."""
