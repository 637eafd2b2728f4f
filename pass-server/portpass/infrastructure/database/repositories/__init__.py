"""SQLAlchemy-backed repository implementations.

Modules here import the domain packages, and the domain services import these
modules lazily, so nothing is re-exported at package level.
"""
