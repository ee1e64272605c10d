"""
Fulfillment Service - Backend API
Order processing with per-category stock rules
"""
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fulfillment.api import orders
from fulfillment.core.config import settings
from fulfillment.core.database import get_db_connection_with_retry
from fulfillment.core.logging import configure_logging

configure_logging()

# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(orders.router, prefix="/orders", tags=["Orders"])


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": "Fulfillment API",
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION
    }


@app.get("/health")
def health():
    """Health check endpoint for monitoring - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        # Minimal retry (fast check)
        conn = get_db_connection_with_retry(max_retries=1, retry_delay=0.5)
        cursor = conn.cursor()

        db_start = time.time()
        cursor.execute("SELECT 1")
        cursor.fetchone()
        db_latency_ms = round((time.time() - db_start) * 1000, 2)

        cursor.close()
        conn.close()
        db_status = "connected"
    except Exception as e:
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    status = "healthy" if db_status == "connected" else "degraded"

    return {
        "status": status,
        "service": "fulfillment-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
            "connection_timeout_s": settings.CONNECTION_TIMEOUT
        },
        "total_latency_ms": total_latency_ms
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fulfillment.main:app", host=settings.API_HOST, port=settings.API_PORT)
