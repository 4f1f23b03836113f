"""Main FastAPI application."""
import logging

import click
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from api.routes import articles_router, feed_router, pages_router
from api.schemas.responses import ErrorResponse, HealthResponse
from api.services.content import ContentService
from shared.config import SiteConfig, load_config
from shared.exceptions import BlogError, ConfigError
from storage.article_store import ArticleStore

logger = logging.getLogger(__name__)

ASSETS_DIR = "assets"


def create_app(config: SiteConfig) -> FastAPI:
    """Build the blog application around a loaded configuration."""
    app = FastAPI(
        title=config.site_title,
        description=config.site_description,
        version="1.0.0"
    )

    # Shared read-only state for every request
    app.state.config = config
    app.state.store = ArticleStore.for_content_root(config.content_root)

    @app.exception_handler(BlogError)
    async def content_error_handler(request: Request, exc: BlogError):
        """Render the not-found page for any content or storage failure."""
        logger.warning(f"{request.method} {request.url.path}: {exc}")
        content = ContentService(request.app.state.config, request.app.state.store)
        return HTMLResponse(
            await content.not_found_page(),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and query values are plain bad requests."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="Bad request", detail=str(exc.errors())).model_dump()
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error", detail=str(exc)).model_dump()
        )

    app.include_router(pages_router)
    app.include_router(articles_router)
    app.include_router(feed_router)

    assets = config.content_root / ASSETS_DIR
    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=assets), name="assets")
    else:
        logger.warning(f"Assets directory {assets} not found, /assets is disabled")

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse()

    return app


@click.command()
@click.argument("config_path", type=click.Path(dir_okay=False))
def main(config_path: str):
    """Serve the blog described by the YAML file CONFIG_PATH."""
    click.echo(f"Starting server with config file at {config_path}")
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e))

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    host, port = config.bind_address()
    logger.info(f"Serving {config.content_root} on {host}:{port}")
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
