from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import settings
from .routes import catalog_routes, loading_routes

app = FastAPI(title="Beam Loading Planner")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loading_routes, prefix="/loading")
app.include_router(catalog_routes, prefix="/catalog")
