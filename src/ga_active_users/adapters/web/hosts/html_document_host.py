"""In-memory HTML document host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markupsafe import Markup, escape

from ga_active_users.domain.models.widget_element import TITLE_CLASS
from ga_active_users.domain.ports import WidgetHost

if TYPE_CHECKING:
    from ga_active_users.domain.models import WidgetElement


class HtmlDocumentHost(WidgetHost):
    """Collects injected styles and elements and renders them as HTML."""

    def __init__(self, page_title: str = "") -> None:
        self.page_title = page_title
        self.stylesheets: list[str] = []
        self.elements: list[WidgetElement] = []
        self.render_count = 0

    def inject_stylesheet(self, css: str) -> None:
        self.stylesheets.append(css)

    def mount(self, element: WidgetElement) -> None:
        self.elements.append(element)

    def refresh(self, element: WidgetElement) -> None:
        # Rendering is pull-based; count refreshes so callers can observe updates.
        self.render_count += 1

    @staticmethod
    def render_element(element: WidgetElement) -> Markup:
        """Render one widget element."""
        return Markup(
            '<div class="{classes}" title="{tooltip}" tabindex="{tabindex}">'
            '<div class="{title_class}">{title}</div>'
            '<div class="{value_classes}">{value}</div>'
            "</div>"
        ).format(
            classes=element.css_classes(),
            tooltip=element.tooltip,
            tabindex=element.tabindex,
            title_class=TITLE_CLASS,
            title=element.title,
            value_classes=element.value_css_classes(),
            value=element.value_text,
        )

    def render(self) -> str:
        """Render the full document with every style and element."""
        styles = Markup("\n").join(
            Markup("<style>{}</style>").format(Markup(css)) for css in self.stylesheets
        )
        body = Markup("\n").join(self.render_element(element) for element in self.elements)
        return str(
            Markup(
                "<!DOCTYPE html>\n<html>\n<head>\n"
                '<meta charset="utf-8">\n<title>{title}</title>\n{styles}\n'
                "</head>\n<body>\n{body}\n</body>\n</html>\n"
            ).format(title=escape(self.page_title), styles=styles, body=body)
        )
