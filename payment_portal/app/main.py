import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payment_portal.app.api import router as api_router
from payment_portal.app.client import make_student_payment_client
from payment_portal.app.settings import settings

logger = logging.getLogger("payment_portal")
# libs.http logs the remote call failures
lib_logger = logging.getLogger("libs")

# Reuse uvicorn handlers when available, otherwise fall back to stdout.
uvicorn_logger = logging.getLogger("uvicorn.error")
if uvicorn_logger.handlers:
    handlers = list(uvicorn_logger.handlers)
else:
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handlers = [stream_handler]

for _log in (logger, lib_logger):
    _log.setLevel(settings.LOG_LEVEL)
    for handler in handlers:
        _log.addHandler(handler)


def _origins(cfg: str) -> list[str]:
    return ["*"] if cfg.strip() == "*" else [o.strip() for o in cfg.split(",") if o.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title="payment_portal")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_origins(settings.CORS_ALLOW_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)

    @app.on_event("startup")
    async def _startup() -> None:
        app.state.client = make_student_payment_client()
        logger.info("payment_portal started api_url=%s", settings.API_URL)

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        client = getattr(app.state, "client", None)
        if client is not None:
            try:
                await client.aclose()
            finally:
                app.state.client = None

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "payment_portal.app.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=False,
        workers=1,
    )
