"""Widget host port."""

from abc import ABC, abstractmethod

from ga_active_users.domain.models.widget_element import WidgetElement


class WidgetHost(ABC):
    """Port for the surface a widget is injected into."""

    @abstractmethod
    def inject_stylesheet(self, css: str) -> None:
        """Add a stylesheet to the host."""
        ...

    @abstractmethod
    def mount(self, element: WidgetElement) -> None:
        """Attach a widget element to the host."""
        ...

    @abstractmethod
    def refresh(self, element: WidgetElement) -> None:
        """Re-render an element after its state changed."""
        ...
