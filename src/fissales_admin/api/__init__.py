"""FastAPI application for the prompt proxy."""
