"""Flask integration for WebGrid request parsing."""

from dotenv import load_dotenv
load_dotenv()  # Load .env file if present (already gitignored)

from flask import Flask

from web.grid_args import grid_args, page_url, sort_url

__all__ = ["grid_args", "page_url", "sort_url", "init_app"]


def init_app(app: Flask) -> Flask:
    """Expose ``sort_url`` and ``page_url`` to the app's templates."""

    @app.context_processor
    def inject_grid_urls():
        return {"sort_url": sort_url, "page_url": page_url}

    return app
