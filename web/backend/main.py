from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from wavelist.core.output import setup_loguru
from wavelist.domain.playlists import PlaylistError
from web.backend.deps import get_config
from web.backend.schemas import ErrorResponse

config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_loguru(config.logging)
    logger.info(f"Serving media from {config.media.root}")
    yield
    logger.info("Application shutdown")


app = FastAPI(title="Wavelist API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PlaylistError)
async def playlist_error_handler(request: Request, exc: PlaylistError):
    """Render playlist failures as the {success, message} envelope."""
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    body = ErrorResponse(message=exc.message)
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(exclude_none=True)
    )


# Include routers
from web.backend.routers import charts, playlist

app.include_router(playlist.router, prefix="/api", tags=["playlist"])
app.include_router(charts.router, prefix="/api", tags=["charts"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# Track URLs from local playlists point here; mounted last so it never
# shadows the API routes
media_prefix = "/" + config.media.root.strip("/")
if media_prefix != "/":
    app.mount(
        media_prefix,
        StaticFiles(directory=config.media.root, check_dir=False),
        name="media",
    )


def run() -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
