"""
FastAPI Application Entry Point.

This is the main entry point for the backend API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.core.config import settings
from apps.core.database import dispose_db, init_db
from apps.core.log import configure_logging
from apps.emotion.router import router as emotion_router
from apps.stats.router import router as stats_router
from apps.users.router import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await init_db()
    yield
    await dispose_db()


app = FastAPI(
    title=settings.APP_NAME,
    description="Backend API for Mood Lens - text emotion analysis, history and usage stats.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(users_router)
app.include_router(emotion_router)
app.include_router(stats_router)


@app.get("/health")
async def health():
    """Global health check."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
