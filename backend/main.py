from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import API_TITLE, API_VERSION, CORS_ORIGINS, LOG_LEVEL

# Routers
from weibull import router as weibull_router

# Initialize logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Quiet per-request connection logs from the insight providers
logging.getLogger('urllib3').setLevel(logging.WARNING)

# Initialize FastAPI app
app = FastAPI(
    title=API_TITLE,
    description="Weibull reliability analysis of failure and suspension data.",
    version=API_VERSION,
)

# Include routers
app.include_router(weibull_router)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint for basic health check."""
    return {"message": "Welcome to the Weibull Analysis API"}


@app.get("/api/health")
async def health_check():
    """Health check endpoint to verify if the API is running."""
    return {"status": "API is up and running!"}
