import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import models  # noqa: F401  registers tables on Base.metadata
from .api import project_data
from .database import ensure_runtime_schema

ensure_runtime_schema()


def _parse_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5000,http://127.0.0.1:5000")
    origins: list[str] = []
    for item in raw.split(","):
        origin = item.strip()
        if origin and origin not in origins:
            origins.append(origin)
    return origins or ["http://localhost:5000", "http://127.0.0.1:5000"]


cors_origins = _parse_cors_origins()

app = FastAPI(title="Listing Admin API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(project_data.router)


@app.get("/")
def read_root():
    return {"message": "Listing Admin API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
