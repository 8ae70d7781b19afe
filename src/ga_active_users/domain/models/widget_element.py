"""Widget element domain model.

Holds what a host renders for one widget: the root element's CSS classes, the
value element's classes and text. Hosts translate this into HTML or terminal
output; the widget itself never touches a concrete rendering surface.
"""

from dataclasses import dataclass, field

ROOT_CLASS = "ga-active-users-widget"
UPDATED_CLASS = f"{ROOT_CLASS}--updated"
ERROR_CLASS = f"{ROOT_CLASS}--error"
TITLE_CLASS = f"{ROOT_CLASS}__title"
VALUE_CLASS = f"{ROOT_CLASS}__value"
ERROR_MSG_CLASS = f"{ROOT_CLASS}__error-msg"

PLACEHOLDER_TEXT = "..."
ERROR_TEXT = "Error"
TOOLTIP = "Active users right now"


@dataclass
class WidgetElement:
    """Mutable view state of a mounted widget."""

    title: str
    value_text: str = PLACEHOLDER_TEXT
    class_list: set[str] = field(default_factory=lambda: {ROOT_CLASS})
    value_class_list: set[str] = field(default_factory=lambda: {VALUE_CLASS})
    tooltip: str = TOOLTIP
    tabindex: int = 0

    @property
    def is_updated(self) -> bool:
        return UPDATED_CLASS in self.class_list

    @property
    def is_error(self) -> bool:
        return ERROR_CLASS in self.class_list

    def show_value(self, value: int, flash: bool) -> None:
        """Display a count, clearing any error treatment."""
        self.class_list.discard(ERROR_CLASS)
        self.value_class_list.discard(ERROR_MSG_CLASS)
        if flash:
            self.class_list.add(UPDATED_CLASS)
        self.value_text = str(value)

    def show_error(self) -> None:
        """Replace the count with the error text and error treatment."""
        self.class_list.add(ERROR_CLASS)
        self.value_text = ERROR_TEXT
        self.value_class_list.add(ERROR_MSG_CLASS)

    def animation_end(self) -> None:
        """Drop the flash class once its animation has completed."""
        self.class_list.discard(UPDATED_CLASS)

    def css_classes(self) -> str:
        return _ordered(self.class_list, ROOT_CLASS)

    def value_css_classes(self) -> str:
        return _ordered(self.value_class_list, VALUE_CLASS)


def _ordered(classes: set[str], root: str) -> str:
    rest = sorted(c for c in classes if c != root)
    return " ".join([root, *rest] if root in classes else rest)
