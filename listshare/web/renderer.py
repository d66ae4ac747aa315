"""
HTML renderer for the list pages.

Turns view models into HTML with Jinja2. A template failure is reported as
an HTML body carrying the error text instead of propagating.
"""

from pathlib import Path
from typing import Any, Union

from fastapi import status
from fastapi.responses import HTMLResponse
from jinja2 import TemplateError
from markupsafe import escape
from starlette.templating import Jinja2Templates

from listshare.logging_config import get_logger
from listshare.schemas.views import CompositeView, DashboardView, FragmentView

logger = get_logger(__name__)

DASHBOARD_TEMPLATE = "lists.html"
FRAGMENT_TEMPLATE = "list_fragment.html"
ERROR_TEMPLATE = "error.html"


class Renderer:
    """Render dispatch over the three view model shapes."""

    def __init__(self, templates_dir: Union[str, Path]):
        self.templates = Jinja2Templates(directory=str(templates_dir))

    def _render(self, template_name: str, context: dict[str, Any]) -> HTMLResponse:
        try:
            template = self.templates.get_template(template_name)
            body = template.render(**context)
        except TemplateError as exc:
            logger.error(
                "Template rendering failed",
                extra={"template": template_name, "error": str(exc)},
            )
            return HTMLResponse(
                content=f"<p>Failed to render {escape(template_name)}: {escape(str(exc))}</p>",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return HTMLResponse(content=body)

    def render_dashboard(self, view: DashboardView) -> HTMLResponse:
        """Full page with no list focused."""
        return self._render(DASHBOARD_TEMPLATE, {"dashboard": view, "focused": None})

    def render_page(self, view: Union[FragmentView, CompositeView]) -> HTMLResponse:
        """Render a list page in whichever shape the selector chose."""
        if isinstance(view, FragmentView):
            return self._render(FRAGMENT_TEMPLATE, {"focused": view})
        if isinstance(view, CompositeView):
            return self._render(
                DASHBOARD_TEMPLATE,
                {"dashboard": view.dashboard, "focused": view},
            )
        raise TypeError(f"Unknown list page view: {type(view).__name__}")

    def render_error(self, status_code: int, title: str, detail: str) -> HTMLResponse:
        """Error page used by the application's exception handlers."""
        response = self._render(
            ERROR_TEMPLATE,
            {"status_code": status_code, "title": title, "detail": detail},
        )
        if response.status_code == status.HTTP_200_OK:
            response.status_code = status_code
        return response
