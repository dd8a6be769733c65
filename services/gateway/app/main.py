# =============================================================================
# FastAPI Main Application
# =============================================================================
# Entry point for the lineage capture gateway.
# =============================================================================

import logging

from fastapi import FastAPI

from app import __version__
from app.config import get_settings
from app.routers import health, lineage

# Loggers of the gateway and its shared libraries
for _name in ("app", "lineage_capture"):
    logging.getLogger(_name).setLevel(get_settings().log_level.upper())

# Application instance
app = FastAPI(
    title="Lineage Capture Gateway",
    description="Archive OpenLineage events for schema- and table-mutating Spark operations.",
    version=__version__,
)

# Include routers
app.include_router(health.router)
app.include_router(lineage.router)
