from __future__ import annotations

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.core.otel import init_otel
from app.middleware.request_id import RequestIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

configure_logging()

app = FastAPI(title=settings.api_name)

app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    # The web client reads alerts, paging and Location from these
    expose_headers=[
        f"X-{settings.client_app_name}-alert",
        f"X-{settings.client_app_name}-error",
        f"X-{settings.client_app_name}-params",
        "X-Total-Count",
        "Link",
        "Location",
        "X-Request-Id",
    ],
)

register_exception_handlers(app)

app.include_router(api_router)

init_otel(app)
