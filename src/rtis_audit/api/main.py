"""FastAPI application wiring for the RTIS journey audit."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .routes import analyze_router

app = FastAPI(title="RTIS Journey Audit")


@app.get("/health")
def health() -> JSONResponse:
    """Simple liveness endpoint used by deployment probes."""

    return JSONResponse({"status": "ok"})


app.include_router(analyze_router)


__all__ = ["app", "health"]
