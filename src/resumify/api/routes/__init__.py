"""Route handlers for the API."""

from resumify.api.routes import documents, generation, health, layouts, resumes

__all__ = [
    "documents",
    "generation",
    "health",
    "layouts",
    "resumes",
]
