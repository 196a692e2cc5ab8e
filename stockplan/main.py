from fastapi import FastAPI

from stockplan.api import health, production, products, raw_materials


def create_app() -> FastAPI:
    app = FastAPI(title="Stockplan", version="0.1.0")

    # Routers
    app.include_router(health.router, tags=["health"])
    app.include_router(products.router, prefix="/products", tags=["products"])
    app.include_router(raw_materials.router, prefix="/raw-materials", tags=["raw-materials"])
    app.include_router(production.router, prefix="/production-plan", tags=["production"])

    return app


app = create_app()
