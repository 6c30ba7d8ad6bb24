"""
FastAPI application for the GitHub proxy.

The Streamlit client calls /api/github on this app; the app holds the
GitHub token and forwards requests upstream.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils.config_loader import load_config
from utils.logger import setup_logger

config = load_config()
logger = setup_logger(config.log_level, __name__)

# Create FastAPI app
app = FastAPI(
    title="Issue Viewer API",
    description="Pass-through proxy to the GitHub REST API",
    version="1.0.0"
)

# Allow the Streamlit client (and anything else configured) to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ui.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# Import and include routes
from backend.routes import router
app.include_router(router)

logger.info("FastAPI app initialized")
