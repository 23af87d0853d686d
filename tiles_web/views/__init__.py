"""View rendering module for HTML templates.

TemplateView renders a Jinja2 template; TilesView renders a Tiles definition
by preparing its component context and layout path first.
"""

from tiles_web.views.resolver import TilesViewResolver
from tiles_web.views.template_view import TemplateView
from tiles_web.views.tiles_view import TilesView

__all__ = ["TemplateView", "TilesView", "TilesViewResolver"]
