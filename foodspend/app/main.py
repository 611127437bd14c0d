import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from foodspend.app.api.routes.orders import router as orders_router
from foodspend.app.api.routes.system import router as system_router
from foodspend.app.config import Settings, get_settings
from foodspend.app.db import build_engine, build_session_factory, init_db
from foodspend.app.domain.contracts import ErrorEnvelope
from foodspend.app.domain.errors import InvalidOrder, OrderError
from foodspend.app.services.order_service import Clock, OrderService, utcnow
from foodspend.app.services.order_store import MemoryOrderStore, OrderStore, SqlOrderStore
from foodspend.app.services.order_validation import IdFactory, uuid_str
from foodspend.app.services.summary_scheduler import SummaryScheduler


logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> OrderStore:
    if not settings.database_url:
        return MemoryOrderStore()
    engine = build_engine(settings.database_url)
    init_db(engine)
    return SqlOrderStore(build_session_factory(engine))


def _error_envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(error=message).model_dump())


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(OrderError)
    async def _order_error(request: Request, exc: OrderError):
        return _error_envelope(400, exc.public_message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return _error_envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        logger.info("Request validation failed on %s: %s", request.url.path, exc.errors())
        # a malformed order body is still a rejected order
        if request.method == "POST" and request.url.path.rstrip("/") == "/orders":
            return _error_envelope(400, InvalidOrder.public_message)
        return _error_envelope(400, "Invalid request")


def create_app(
    settings: Optional[Settings] = None,
    *,
    store: Optional[OrderStore] = None,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> FastAPI:
    settings = settings or get_settings()
    store = store if store is not None else build_store(settings)
    service = OrderService(store, clock=clock or utcnow, id_factory=id_factory or uuid_str)
    scheduler = SummaryScheduler(service) if settings.summary_scheduler_enabled else None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if scheduler is not None:
            scheduler.start()
        logger.info("Food spend API ready (store=%s, port=%s)", store.kind, settings.port)
        try:
            yield
        finally:
            if scheduler is not None:
                await scheduler.stop()

    app = FastAPI(title="Food Spend API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.order_service = service
    app.state.summary_scheduler = scheduler

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    app.include_router(orders_router)
    app.include_router(system_router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    logging.basicConfig(level=settings.log_level)
    logger.info("Food Ordering API running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
