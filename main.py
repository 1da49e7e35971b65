""" main.py: FastAPI application entry point and runtime configuration.

This module builds the ASGI app, mounts the skill and health routers, configures CORS
(Cross‑Origin Resource Sharing), and exposes a Prometheus metrics endpoint. When executed
directly, it starts a Uvicorn server using host/port values from configuration.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
import logging
from config import CONFIG

# --- Router Imports ---
from api import health as health_router
from api import skill as skill_api

from version import __version__

# Get a logger instance for this module
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: App with the health route at /health, the skill route at /api/alexa,
        Prometheus metrics at /metrics and CORS configured from CONFIG.
    """
    app = FastAPI(title="Smart Home Discovery Skill", version=__version__)

    app.include_router(health_router.router, tags=["Health"])
    app.include_router(skill_api.router, prefix="/api", tags=["Skill"])

    # Add Prometheus metrics endpoint
    app.mount("/metrics", make_asgi_app())

    allow_origins = CONFIG.get('cors', {}).get('allow_origins', ["*"])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("Skill app created with handlers: %s", skill_api.skill_router.get_handler_info())
    return app


app = create_app()

if __name__ == '__main__':
    import uvicorn
    logger.info("[__main__] Starting Uvicorn server for main.py")
    uvicorn.run(
        app,
        host=CONFIG.get('server', {}).get('host', '0.0.0.0'),
        port=CONFIG.get('server', {}).get('port', 8080)
    )
