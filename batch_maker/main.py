from fastapi import FastAPI
from batch_maker.routers import recipes_parse, recipes_ops, workflows_library
from batch_maker.routers import health
from batch_maker.core.logging import setup_logging
from batch_maker.core.middleware import RequestLoggingMiddleware


def create_app() -> FastAPI:
    app = FastAPI(title="Batch Maker Recipe Import")
    app.include_router(recipes_parse.router)
    app.include_router(recipes_ops.router)
    app.include_router(workflows_library.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app

app = create_app()
