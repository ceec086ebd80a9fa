"""FastAPI adapter for the audit engine."""
