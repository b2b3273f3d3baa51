"""FastAPI application entry point. Registers middleware, API routers and static serving."""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.database import Base, engine
from app.errors import register_error_handlers
import app.models  # noqa: F401 - registers model metadata
from app.routers import (
    auth, properties, admin_properties, journal, admin_journal,
    admin_images, cms, uploads, experiences,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="YVE Collective",
    description="Curated retreats: public listings, journal and admin CMS",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Register all routers
app.include_router(auth.router)
app.include_router(properties.router)
app.include_router(admin_properties.router)
app.include_router(journal.router)
app.include_router(admin_journal.router)
app.include_router(admin_images.router)
app.include_router(cms.router)
app.include_router(uploads.router)
app.include_router(experiences.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "YVE Collective"}


# Static file serving for locally stored blobs
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Serve frontend static files
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "frontend")
if os.path.exists(frontend_dir):
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
