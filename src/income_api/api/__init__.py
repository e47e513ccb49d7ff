"""FastAPI application for the income endpoints."""
