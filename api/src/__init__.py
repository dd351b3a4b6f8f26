"""FastAPI service for the Task Tracker API.

This package provides REST API endpoints to list, fetch and create users
and tasks held in memory, plus a readiness probe and API documentation.
"""

__version__ = "1.0.0"
