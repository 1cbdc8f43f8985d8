"""
Booth Map FastAPI Application

Main entry point for the Booth Map application, serving the booth map REST
API, the teams list and the static map page.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2025-12-17
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

# Load environment variables before routers read them
load_dotenv()

from server.booths import router as booths_router  # noqa: E402
from server.teams import router as teams_router  # noqa: E402

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
STATIC_DIR = os.path.join(BASE_DIR, "static")

app = FastAPI(title="Booth Interactive Map")

# Include all routers
app.include_router(booths_router)
app.include_router(teams_router)


@app.get("/api/health")
def health():
    """Liveness check."""
    return {"status": "ok"}


# ============================================================
# Static Files
# ============================================================

if os.path.isdir(STATIC_DIR):

    @app.get("/", include_in_schema=False)
    def index():
        """Serve the map page from static/index.html."""
        return FileResponse(os.path.join(STATIC_DIR, "index.html"))

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
