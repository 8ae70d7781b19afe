"""Stylesheet injected alongside each widget."""

from ga_active_users.domain.models import WidgetPosition

FLASH_DURATION_SECONDS = 0.7
EDGE_OFFSET = "20px"


def build_stylesheet(position: WidgetPosition) -> str:
    """Return the widget CSS with the element pinned to the given corner."""
    return f"""
@keyframes ga-widget-flash {{
    0% {{ background-color: #eaf1fb; }}
    100% {{ background-color: #ffffff; }}
}}

.ga-active-users-widget {{
    position: fixed;
    {position.vertical_edge}: {EDGE_OFFSET};
    {position.horizontal_edge}: {EDGE_OFFSET};
    background-color: #ffffff;
    border: 1px solid #e0e0e0;
    font-size: var(--ga-widget-font-size, 12px);
    border-radius: 1em;
    padding: 0.25em 0.3em;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
    z-index: 9999;
    box-shadow: 0 0.25em 0.75em rgba(0,0,0,0.1);
    display: flex;
    align-items: center;
    gap: 0.5em;
    transition: opacity 0.3s ease-in-out, background-color 0.3s ease;
    opacity: 0.75;
    cursor: default;
}}
.ga-active-users-widget:hover, .ga-active-users-widget:focus {{
    opacity: 1;
    outline: none;
}}
.ga-active-users-widget--updated {{
    animation: ga-widget-flash {FLASH_DURATION_SECONDS}s ease-out;
}}
.ga-active-users-widget--error {{
    background-color: #fff0f0;
    border-color: #ffc0c0;
}}
.ga-active-users-widget__title {{
    font-size: 0.9em;
    font-weight: 500;
    color: #5f6368;
    margin: 0;
}}
.ga-active-users-widget__value {{
    font-weight: 700;
    color: #1a73e8;
    line-height: 1.2;
}}
.ga-active-users-widget__error-msg {{
    font-size: 0.7em;
    color: #d93025;
}}
"""
