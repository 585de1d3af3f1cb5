import logging

from fastapi import FastAPI

from service_orders.config import Settings
from service_orders.infrastructure.api import register_exception_handlers, router

settings = Settings.from_env()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title=settings.app_title,
    description="API to manage the lifecycle of repair-shop service orders",
    version=settings.app_version
)

register_exception_handlers(app)
app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
