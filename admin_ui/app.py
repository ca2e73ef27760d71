import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from . import __version__
from .components import LinkComponent, PaginationComponent, TableComponent, ViewContext, content_tag
from .core.config import Config
from .core.container import Container
from .core.middleware import build_exception_handler, log_requests
from .core.validation import validate_paging, validate_resource_name
from .providers.main_nav import main_nav_provider
from .resources import RESOURCES
from .services.records import RecordSource, sample_record_source

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))


def build_container() -> Container:
    """Register the UI components and start-up providers."""
    container = Container()
    container.register("ui/table", TableComponent)
    container.register("ui/pagination", PaginationComponent)
    container.register("ui/link", LinkComponent)
    container.register_provider("main_nav", main_nav_provider(RESOURCES.values()))
    return container


def select_record_source(config: Config) -> RecordSource:
    if config.is_development:
        return sample_record_source()

    from .services.supabase_service import SupabaseRecordSource
    return SupabaseRecordSource(config)


def render_page(request: Request, heading: str, content: Markup, current: Optional[str] = None):
    state = request.app.state
    return templates.TemplateResponse(request, "layout.html", {
        "title": state.config.ADMIN_TITLE,
        "heading": heading,
        "content": content,
        "current": current,
        "nav_items": state.container.nav_items,
    })


def create_app(config: Optional[Config] = None, record_source: Optional[RecordSource] = None) -> FastAPI:
    config = config or Config()
    container = build_container()
    container.start("main_nav")

    app = FastAPI(title="Admin UI", version=__version__)
    app.state.config = config
    app.state.container = container
    app.state.record_source = record_source or select_record_source(config)

    app.mount("/admin/assets", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="admin_assets")

    # CORS setup
    allowed_origins = config.allowed_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    app.add_exception_handler(Exception, build_exception_handler(allowed_origins))

    @app.get("/admin", response_class=HTMLResponse)
    async def admin_index(request: Request):
        context = ViewContext.from_request(request)
        link = container.component("ui/link")
        items = Markup("").join(
            content_tag("li", link(item.href, item.label).render_in(context))
            for item in container.nav_items
        )
        return render_page(request, "Dashboard", content_tag("ul", items))

    @app.get("/admin/{resource_name}", response_class=HTMLResponse)
    async def resource_index(
        request: Request,
        resource_name: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ):
        validate_resource_name(resource_name)
        resource = RESOURCES.get(resource_name)
        if resource is None:
            raise HTTPException(status_code=404, detail=f"Unknown resource: {resource_name}")

        number, per_page = validate_paging(
            page,
            per_page,
            default_per_page=config.ADMIN_PER_PAGE,
            max_per_page=config.ADMIN_MAX_PER_PAGE,
        )
        records_page = app.state.record_source.fetch_page(resource, number, per_page)

        table = container.component("ui/table")(
            page=records_page,
            columns=resource.columns(),
            pagination_component=container.component("ui/pagination"),
        )
        content = table.render_in(ViewContext.from_request(request))
        return render_page(request, resource.title, content, current=resource.name)

    @app.get("/health")
    async def health_check():
        """Basic health and dependency checks for the API."""
        health_start_time = time.time()

        try:
            config.validate()
            app.state.record_source.ping()

            health_duration = time.time() - health_start_time

            return {
                "status": "healthy",
                "service": "admin-ui",
                "timestamp": datetime.now().isoformat(),
                "response_time_ms": round(health_duration * 1000, 2)
            }
        except Exception as e:
            health_duration = time.time() - health_start_time
            logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

            return {
                "status": "unhealthy",
                "service": "admin-ui",
                "timestamp": datetime.now().isoformat(),
                "error": str(e),
                "response_time_ms": round(health_duration * 1000, 2)
            }

    @app.get("/")
    async def root():
        """Return basic service information."""

        return {
            "service": "Admin UI",
            "version": __version__,
            "endpoints": {
                "admin": "/admin",
                "resources": {name: resource.href for name, resource in RESOURCES.items()},
                "health": "/health"
            },
            "timestamp": datetime.now().isoformat(),
            "description": "Administrative listings rendered as paginated tables"
        }

    return app


app = create_app()
