# app/main.py
from fastapi import FastAPI
from app.api.routers import products
from app.utils.settings import APP_HOST, APP_PORT
from app.utils.logging import get_logger
import uvicorn

logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Product Price Service",
        version="1.0.0",
    )

    # Include routers
    app.include_router(products.router)

    logger.info("Product Price Service: routers registered")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
