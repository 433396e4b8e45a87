"""Main FastAPI application"""

from fastapi import FastAPI

from app.core.config import settings
from app.core.events import lifespan
from app.api.health import router as health_router

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Sends attendance push notifications for new Firestore records",
    version=settings.APP_VERSION,
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan
)

app.include_router(health_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
