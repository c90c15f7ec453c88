# /hostlist/adapters/api/fastapi_app.py
from __future__ import annotations
import logging
from itertools import islice

from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel

from hostlist.config import settings
from hostlist.adapters.system.logging_cfg import configure_logger
from hostlist.domain.expand_service import ExpandService, ExpansionError

LOG = logging.getLogger("adapter.api")
app = FastAPI(title="hostlist")
configure_logger(settings.LOG_LEVEL)

_service = ExpandService()

class ExpandRequestModel(BaseModel):
    expressions: list[str]

class ExpandResponseModel(BaseModel):
    hosts: list[str]
    count: int

@app.get("/health")
def health() -> dict:
    return {"status": "ok"}

@app.post("/expand")
def expand(payload: ExpandRequestModel, x_api_key: str | None = Header(default=None)) -> ExpandResponseModel:
    if settings.API_KEY and x_api_key != settings.API_KEY:
        raise HTTPException(status_code=401, detail="invalid api key")

    try:
        # one past the cap tells us the request is too large without expanding all of it
        hosts = list(islice(_service.expand(payload.expressions), settings.MAX_HOSTS + 1))
    except ExpansionError as e:
        raise HTTPException(
            status_code=400,
            detail={"position": e.position, "kind": e.error.kind, "message": str(e.error)},
        ) from e

    if len(hosts) > settings.MAX_HOSTS:
        LOG.warning("expanded hosts exceed max", extra={"extra": {"max": settings.MAX_HOSTS}})
        raise HTTPException(status_code=413, detail=f"expansion exceeds MAX_HOSTS ({settings.MAX_HOSTS})")

    LOG.info("expanded hosts", extra={"extra": {"in": len(payload.expressions), "out": len(hosts)}})
    return ExpandResponseModel(hosts=hosts, count=len(hosts))
