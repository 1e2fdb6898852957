"""
AdScreen FastAPI Application — Content risk scoring for classified ads.

  POST /moderate        → score one ad submission
  POST /moderate/batch  → score several submissions
  POST /reviews         → record a manual review verdict
  GET  /rules           → active rule set summary
  GET  /stats           → moderation outcome statistics
  GET  /health          → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adscreen.api.dependencies import get_moderation_engine
from adscreen.api.routes.admin import router as admin_router
from adscreen.api.routes.health import router as health_router
from adscreen.api.routes.moderate import router as moderate_router
from adscreen.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("adscreen")

# Load rules now: a bad rule source must stop the process, not approve everything
get_moderation_engine()

app = FastAPI(
    title="AdScreen",
    description="Deterministic risk scoring for classified ad submissions",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(moderate_router)
app.include_router(admin_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc), "body": body.decode("utf-8")[:100]},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors with non-JSON context (e.g. exceptions) stringified."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {k: str(v) for k, v in error["ctx"].items()}
        errors.append(error)
    return errors
