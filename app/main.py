from dotenv import load_dotenv
load_dotenv()

import os
import time
import uuid
import logging

import psycopg
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.deps import get_store
from app.routers import admin, articles

app = FastAPI(title="Finshots API", version="1.0.0")

# -----------------------------
# Logging (observability)
# -----------------------------
logger = logging.getLogger("finshots")
logging.basicConfig(level=logging.INFO)


@app.middleware("http")
async def request_logging(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    start = time.time()

    response = await call_next(request)

    duration_ms = int((time.time() - start) * 1000)
    response.headers["x-request-id"] = request_id

    logger.info(
        "request_id=%s method=%s path=%s status=%s duration_ms=%s",
        request_id,
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


# -----------------------------
# Cache headers
# -----------------------------
@app.middleware("http")
async def cache_headers(request: Request, call_next):
    response = await call_next(request)

    cache = "no-store"
    if request.method == "GET" and request.url.path.startswith("/api/articles"):
        # browsers revalidate so admin edits show on the next read
        cache = "no-cache"

    response.headers["Cache-Control"] = cache
    return response


# -----------------------------
# CORS (prod vs dev)
# -----------------------------
env = os.getenv("ENV", "dev")

if env == "prod":
    allowed_origins = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()
    ]
else:
    allowed_origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


# -----------------------------
# Error mapping
# -----------------------------
@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    # malformed query params and bodies are client errors: 400, not 422
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(psycopg.Error)
async def storage_error(request: Request, exc: psycopg.Error):
    logger.exception("storage failure method=%s path=%s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Storage unavailable"})


# -----------------------------
# Core endpoints
# -----------------------------
@app.get("/")
def root():
    return {"message": "Welcome to the Finshots API", "docs": "/docs"}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/health/db")
def health_db():
    try:
        store = get_store()
        count = len(store.query_all())
        return {"status": "ok", "store": type(store).__name__, "articles": count}
    except Exception as e:
        logger.exception("store health check failed")
        return {"status": "degraded", "store": "error", "error": str(e)[:200]}


@app.get("/version")
def version():
    return {
        "service": "finshots-api",
        "git_sha": os.getenv("GIT_SHA"),
        "store": os.getenv("ARTICLE_STORE", "memory"),
        "env": env,
    }


# -----------------------------
# API routers
# -----------------------------
app.include_router(articles.router, prefix="/api", tags=["articles"])
app.include_router(admin.router, prefix="/api", tags=["admin"])


def main():
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        reload=env != "prod",
    )


if __name__ == "__main__":
    main()
