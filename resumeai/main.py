import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from resumeai.api.v1.health import router as health_router
from resumeai.api.v1.session import router as session_router
from resumeai.api.v1.analysis import router as analysis_router
from resumeai.core.cors import cors_allowed_origins
from resumeai.core.rate_limit import limiter
from resumeai.core.config import settings
from resumeai.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="ResumeAI Report Client", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(session_router, prefix="/v1", tags=["Session"])
app.include_router(analysis_router, prefix="/v1", tags=["Analysis"])
