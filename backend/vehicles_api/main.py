# backend/vehicles_api/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
import time
import logging

from .api.v1 import vehicles
from .core.config import settings
from .core.database import engine, Base, SessionLocal
from .core.exceptions import VehicleNotFound
from .models import vehicle_model

# Create database tables
Base.metadata.create_all(bind=engine)

# Setup Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI App
app = FastAPI(
    title="Vehicles API",
    description="Vehicle records enriched with price and location data",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(
    vehicles.router,
    prefix="/cars",
    tags=["Vehicles"]
)

logger.info("Vehicle routes registered")

# Root Endpoint
@app.get("/", tags=["System"])
def read_root():
    """Welcome endpoint with API information"""
    return {
        "message": "Vehicles API",
        "version": "1.0.0",
        "documentation": "/docs",
        "health_check": "/health",
    }

# Health Check Endpoint
@app.get("/health", tags=["System"])
def health_check():
    """Report database connectivity"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = f"error: {str(e)}"
    finally:
        db.close()

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "Vehicles API",
        "timestamp": time.time(),
        "components": {
            "database": db_status,
            "pricing_endpoint": settings.PRICING_ENDPOINT,
            "maps_endpoint": settings.MAPS_ENDPOINT,
        }
    }

# Request Logging Middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.3f}s"
    )

    return response

# Error Handlers
@app.exception_handler(VehicleNotFound)
async def vehicle_not_found_handler(request: Request, exc: VehicleNotFound):
    """Translate a missing vehicle into a 404"""
    logger.info(f"Vehicle {exc.vehicle_id} not found ({request.method} {request.url.path})")
    return JSONResponse(status_code=404, content={"detail": "Vehicle not found"})

@app.exception_handler(500)
async def internal_error_handler(request: Request, exc):
    """Custom 500 handler"""
    logger.error(f"Internal server error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please contact support.",
            "request_path": request.url.path
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("vehicles_api.main:app", host="0.0.0.0", port=8000)
