"""FastAPI entry point for SupremePower."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from supremepower import __version__
from supremepower.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

from .agents_api import router as agents_router  # noqa: E402
from .detection_api import router as detection_router  # noqa: E402
from .orchestration_api import router as orchestration_router  # noqa: E402
from .runtime_config_api import router as runtime_config_router  # noqa: E402
from .skills_api import router as skills_router  # noqa: E402

app = FastAPI(title="SupremePower", version=__version__)

app.include_router(orchestration_router)
app.include_router(agents_router)
app.include_router(skills_router)
app.include_router(detection_router)
app.include_router(runtime_config_router)


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": __version__,
        "server": f"{settings.server_host}:{settings.server_port}",
    }


def run() -> None:
    import uvicorn

    # Off by default; set RELOAD=true while developing.
    enable_reload = os.environ.get("RELOAD", "false").lower() in ("true", "1", "yes")
    settings.ensure_directories()
    logger.info(f"[boot] serving on {settings.server_host}:{settings.server_port}")
    uvicorn.run(
        "supremepower.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=enable_reload,
        access_log=False,
    )


if __name__ == "__main__":
    run()
