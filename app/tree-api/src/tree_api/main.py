import uvicorn
from fastapi import FastAPI

from tree_api.config import settings
from tree_api.routers import health, tree



app = FastAPI(
    title="Category Tree API",
    description="REST interface for rendering catalog category trees.",
    version="0.1.0",
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router)
app.include_router(tree.router, prefix="/api/v1")


@app.get("/", tags=["root"])
def root() -> dict[str, str]:
    return {"message": "Category Tree API", "docs": "/docs"}


# ── Entrypoint ────────────────────────────────────────────────────────────────
def start() -> None:
    """CLI entrypoint used by the `start-api` script."""
    uvicorn.run(
        "tree_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    start()
