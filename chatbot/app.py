# ============================================================
# Chatbot Gateway FastAPI App
# ------------------------------------------------------------
# HTTP surface of the provider gateway:
#   - POST /api/chat   → one normalized text reply, or {error}
#   - GET  /api/health → which provider credentials are configured
# ============================================================

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# --- Local imports ---
from chatbot.settings import Settings, settings as default_settings
from chatbot.gateway import ProviderGateway
from chatbot.log import setup_logging


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatRequest(BaseModel):
    # both fields stay loose: filtering and fallback happen in the gateway
    provider: Optional[Any] = "openai"
    messages: Optional[Any] = None


class ChatPayload(BaseModel):
    text: str


class ErrorPayload(BaseModel):
    error: str


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(settings: Optional[Settings] = None, gateway: Optional[ProviderGateway] = None) -> FastAPI:
    settings = settings or default_settings
    gateway = gateway or ProviderGateway(settings=settings)
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.app_name, version="0.1")
    app.state.gateway = gateway
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        too_large = JSONResponse(status_code=413, content={"error": "Request body too large"})
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                if int(declared) > settings.MAX_BODY_BYTES:
                    return too_large
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid Content-Length"})
        elif request.method in ("POST", "PUT", "PATCH"):
            # chunked upload: no declared length, measure what arrived
            if len(await request.body()) > settings.MAX_BODY_BYTES:
                return too_large
        return await call_next(request)

    # ------------------------------------------------------------
    # 💬 Main chat route
    # ------------------------------------------------------------
    @app.post("/api/chat", response_model=ChatPayload, responses={400: {"model": ErrorPayload}, 413: {"model": ErrorPayload}, 500: {"model": ErrorPayload}})
    def chat(req: Optional[ChatRequest] = None):
        req = req or ChatRequest()
        out = gateway.handle(req.provider, req.messages)
        if not out.ok:
            return JSONResponse(status_code=out.status_code, content=out.body)
        return out.body

    # ------------------------------------------------------------
    # 🧭 Health checks
    # ------------------------------------------------------------
    @app.get("/api/health")
    def health():
        return gateway.health()

    @app.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "env": settings.ENV,
            "app": settings.app_name,
        }

    @app.get("/")
    def hello():
        return {"message": f"{settings.app_name} running."}

    return app


app = create_app()
