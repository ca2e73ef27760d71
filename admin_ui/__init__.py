"""Admin UI: table components and the FastAPI engine that serves them."""

__version__ = "1.0.0"
