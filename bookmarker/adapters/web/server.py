"""FastAPI application and startup."""

import sys
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from pydantic import BaseModel

from bookmarker.adapters.web.routes import interactions_router
from bookmarker.config import AppConfig

app = FastAPI(title="Bookmarker")
app.include_router(interactions_router)


def _log(msg: str):
    print(msg, file=sys.stderr)


class HealthResponse(BaseModel):
    ok: bool


@app.middleware("http")
async def log_request(request: Request, call_next):
    client = request.client.host if request.client else "unknown client"
    _log(f"{datetime.now(timezone.utc).isoformat()} - [{request.url.path}], from: {client}")
    return await call_next(request)


@app.get("/healthz", response_model=HealthResponse)
async def healthz():
    return HealthResponse(ok=True)


@app.on_event("startup")
async def startup_event():
    config = AppConfig.from_env()
    if not config.discord.public_key:
        _log("DISCORD_PUBLIC_KEY not set: every interaction will be rejected")
    if not config.discord.is_configured:
        _log("DISCORD_APPLICATION_ID / DISCORD_TOKEN not set: outbound calls will fail")
    _log("Ready!")


def main():
    uvicorn.run(app, host="0.0.0.0", port=AppConfig.from_env().port, log_level="info")


if __name__ == "__main__":
    main()
