import logging
from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from app.api.router import api_router
from app.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Exoplanet System Explorer API",
    description="""
    🚀 **Interactive Exoplanet System Explorer**

    Derives planetary systems from light-curve analysis results and animates
    them as orbiting bodies for 3D viewers.

    ## 🎯 **Main Features:**

    ### 🪐 **Planet Synthesis**
    - Primary planet copied from the analysis result
    - Companion planet for large datasets (more than 5000 time points)
    - Transiting gas giant for high flux variation (std dev above 0.01)
    - Reproducible variation through an explicit seed

    ### 🌌 **System Scene**
    - Circular orbits, inner bodies faster than outer ones
    - Frame-by-frame animation driven by the client
    - Positions ready to render on a flat orbital plane

    ### 🖱 **Pointer Interaction**
    - Single active body under the pointer
    - Stale leave events ignored
    - Cursor hint and selected body exposed to the renderer

    ## 🛠 **Available Endpoints:**

    - **`/api/v1/synthesis/`** - Planet Synthesis
    - **`/api/v1/scene/`** - System Scene and pointer events
    - **`/api/v1/archive/`** - Archive data fetch (simulated)
    """,
    version="1.0.0",
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url="/redoc" if settings.enable_redoc else None
)

app.add_middleware(
    CORSMiddleware,
    **settings.get_cors_config()
)

app.include_router(api_router, prefix="/api")

@app.on_event("startup")
async def startup_event():
    logger.info("🚀 Exoplanet System Explorer API started")

@app.get("/")
async def root():
    return {
        "message": "Exoplanet System Explorer API Running ... 🚀",
        "version": "1.0.0",
        "status": "operational",
        "features": {
            "synthesis": "✅ Active",
            "scene": "✅ Active",
            "interaction": "✅ Active",
            "archive_fetch": "🧪 Simulated"
        },
        "endpoints": {
            "synthesis": "/api/v1/synthesis/",
            "scene": "/api/v1/scene/",
            "archive": "/api/v1/archive/fetch"
        },
        "documentation": "/docs"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
        reload=settings.api_reload
    )
