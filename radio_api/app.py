"""FastAPI application for the radio API.

Routes:
    GET  /api/{station_id}/np      song now playing on a station
    POST /api/{station_id}/np      announce the song now playing
    GET  /api/{station_id}/random  pick, announce and return a random song
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from .config import Settings
from .error_handlers import setup_exception_handlers
from .exceptions import ConfigError
from .models import ErrorResponse, HealthResponse, Song
from .now_playing import NowPlayingStore
from .service import StationService

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


def configure_logging(level: str = "INFO") -> None:
    """Log to stdout without timestamps."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_service(request: Request) -> StationService:
    """Dependency returning the service created at startup."""
    return request.app.state.service


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings; read from the environment when omitted.

    Returns:
        FastAPI: Configured application.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the now-playing store and check the station config."""
        logger.info("Starting radio API...")
        config_path = Path(settings.config_path) if settings.config_path else None
        service = StationService(
            NowPlayingStore(),
            config_path=config_path,
            strict_station_writes=settings.strict_station_writes,
        )

        try:
            config = await asyncio.to_thread(service.load_config)
        except ConfigError as e:
            logger.critical(f"Cannot start without station config: {e.detail}")
            raise

        logger.info(f"Loaded {len(config.stations)} stations, music root {config.music_root}")
        app.state.service = service
        logger.info(f"Listening on port {settings.port}")
        try:
            yield
        finally:
            logger.info("Shutting down radio API...")
            service.store.clear()

    app = FastAPI(
        title=settings.app_name,
        description="Now-playing tracker for locally stored radio stations",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    @app.get("/api/{station_id}/np", response_model=Song, responses=ERROR_RESPONSES)
    async def get_now_playing(station_id: str, service: StationService = Depends(get_service)):
        """Get the song now playing on a station.

        An empty song means nothing has been played yet.
        """
        return await asyncio.to_thread(service.get_now_playing, station_id)

    @app.post("/api/{station_id}/np", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES)
    async def set_now_playing(
        station_id: str, song: Song, service: StationService = Depends(get_service)
    ):
        """Announce the song now playing on a station."""
        await asyncio.to_thread(service.set_now_playing, station_id, song)
        return Response(status_code=status.HTTP_200_OK)

    @app.get("/api/{station_id}/random", response_model=Song, responses=ERROR_RESPONSES)
    async def random_song(station_id: str, service: StationService = Depends(get_service)):
        """Pick a random song from the station's directories.

        The chosen song also becomes the station's now-playing song.
        """
        return await asyncio.to_thread(service.pick_random_song, station_id)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(service: StationService = Depends(get_service)):
        """Health check endpoint.

        Returns:
            HealthResponse: Station count and number of stations playing.
        """
        playing = sum(1 for song in service.store.snapshot().values() if not song.is_empty())

        try:
            config = await asyncio.to_thread(service.load_config)
        except ConfigError as e:
            logger.warning(f"Health check failed: {e.detail}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "unhealthy",
                    "service": "radio-api",
                    "stations": 0,
                    "playing": playing,
                },
            )

        return HealthResponse(
            status="healthy",
            service="radio-api",
            stations=len(config.stations),
            playing=playing,
        )

    @app.get("/")
    async def root():
        """Root endpoint.

        Returns:
            dict: Service information.
        """
        return {
            "service": "radio-api",
            "version": settings.app_version,
            "status": "running",
            "endpoints": {
                "now_playing": "/api/{station_id}/np",
                "random": "/api/{station_id}/random",
                "health": "/health",
            },
        }

    return app


def main() -> None:
    """Run the API server."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
