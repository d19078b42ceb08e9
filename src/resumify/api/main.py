"""FastAPI application entry point for the Resumify API."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resumify.api.routes import documents, generation, health, layouts, resumes

app = FastAPI(
    title="Resumify API",
    description="Edit one resume document through interchangeable visual layouts",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(layouts.router, prefix="/api")
app.include_router(documents.router, prefix="/api")
app.include_router(generation.router, prefix="/api")
app.include_router(resumes.router, prefix="/api")


def main(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the development server."""
    import uvicorn

    from resumify.logging_config import configure_logging

    configure_logging()
    uvicorn.run(
        "resumify.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
