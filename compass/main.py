from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# IMPORT ROUTERS
from compass.routers.health import router as health_router
from compass.routers.analysis import router as analysis_router
from compass.routers.narrative import router as narrative_router
from compass.config import get_settings
from compass.core.exceptions import EmptyUploadError
from compass.core.logging import configure_logging
load_dotenv()
configure_logging()


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Analysis"},
    {"name": "Narrative"},
]

settings = get_settings()

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


# REGISTER EXCEPTION HANDLERS
@app.exception_handler(EmptyUploadError)
async def empty_upload_handler(request: Request, exc: EmptyUploadError):
    return JSONResponse(
        status_code=422,
        content={
            "error_code": "EMPTY_UPLOAD",
            "message": exc.message,
            "details": None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)      # Health
app.include_router(analysis_router)    # Analysis
app.include_router(narrative_router)   # Narrative


@app.get("/", tags=["Root"])
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "compass.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
