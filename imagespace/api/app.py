"""FastAPI application for the image gallery."""

from fastapi import FastAPI

from .. import __version__
from .routers import config, dataset, images, selection, tags

app = FastAPI(title="Image Space", version=__version__)

app.include_router(images.router, prefix="/api")
app.include_router(selection.router, prefix="/api")
app.include_router(tags.router, prefix="/api")
app.include_router(config.router, prefix="/api")
app.include_router(dataset.router, prefix="/api")


@app.get("/api/health")
def health() -> dict:
    """Health check."""
    return {"status": "healthy"}
