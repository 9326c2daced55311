"""
Backend package for the 4-H record book API.

This package provides a FastAPI application over a per-user partitioned
document store, with an in-memory store for development and tests and a
SQLAlchemy-backed store for Postgres.
"""
