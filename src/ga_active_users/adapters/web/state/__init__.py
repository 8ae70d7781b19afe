"""State held by a single widget instance."""

from ga_active_users.adapters.web.state.widget_state import WidgetDisplayState, WidgetStatus

__all__ = ["WidgetDisplayState", "WidgetStatus"]
