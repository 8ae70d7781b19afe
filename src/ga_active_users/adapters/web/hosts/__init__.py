"""Widget hosts: surfaces a widget can be mounted on."""

from ga_active_users.adapters.web.hosts.console_host import ConsoleWidgetHost
from ga_active_users.adapters.web.hosts.html_document_host import HtmlDocumentHost

__all__ = ["ConsoleWidgetHost", "HtmlDocumentHost"]
