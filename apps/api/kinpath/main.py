from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import catalog as catalog_routes
from .routes import dashboard as dashboard_routes
from .routes import feed as feed_routes
from .routes import plan as plan_routes


app = FastAPI(
    title="Kinpath Personalization API",
    version="0.1.0",
    description="Developmental age, milestone scheduling, and feed ranking for family profiles",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

app.include_router(dashboard_routes.router)
app.include_router(plan_routes.router)
app.include_router(feed_routes.router)
app.include_router(catalog_routes.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/")
async def root() -> dict:
    return {"message": "Kinpath personalization API ready"}
