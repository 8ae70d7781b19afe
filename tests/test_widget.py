"""Tests for widget initialization, lifecycle and hosts."""

import asyncio
import io

import pytest

from ga_active_users.adapters.web.hosts import ConsoleWidgetHost, HtmlDocumentHost
from ga_active_users.adapters.web.widget import build_stylesheet, initialize
from ga_active_users.domain.models import WidgetElement, WidgetPosition
from ga_active_users.domain.models.widget_element import UPDATED_CLASS
from tests.test_api_poller import FakeResponse, FakeSession, ok

OPTIONS = {
    "apiUrl": "https://example.com/realtime",
    "propertyId": "123",
    "reloadTimeInterval": 10,
}


async def wait_for(condition, attempts: int = 200) -> None:  # noqa: ANN001
    for _ in range(attempts):
        if condition():
            return
        await asyncio.sleep(0.01)


class TestInitialize:
    """Tests for widget initialization."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["apiUrl", "propertyId"])
    async def test_when_required_option_missing_then_host_is_untouched(
        self, missing: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given a missing required option, when initializing, then an error is logged and nothing is mounted."""
        options = {key: value for key, value in OPTIONS.items() if key != missing}
        host = HtmlDocumentHost()

        handle = await initialize(options, host)

        assert handle is None
        assert host.stylesheets == []
        assert host.elements == []
        assert "`apiUrl` and `propertyId` are required options." in caplog.text

    @pytest.mark.asyncio
    async def test_mounts_one_stylesheet_and_element_then_polls(self) -> None:
        """Given valid options, when initializing, then one stylesheet and element are injected and polled immediately."""
        host = HtmlDocumentHost()
        session = FakeSession(ok(5))

        handle = await initialize(OPTIONS, host, session=session)  # type: ignore[arg-type]
        assert handle is not None
        try:
            assert len(host.stylesheets) == 1
            assert host.elements == [handle.element]
            assert handle.element.title == "Online Users"
            await wait_for(lambda: handle.state.status != "pending")
        finally:
            await handle.stop()

        assert handle.element.value_text == "5"
        assert not handle.is_running

    @pytest.mark.asyncio
    async def test_stop_halts_polling(self) -> None:
        """Given a running widget, when stopped, then polling ends and the element stays mounted."""
        host = HtmlDocumentHost()
        session = FakeSession(ok(1), ok(2))

        handle = await initialize(OPTIONS, host, session=session)  # type: ignore[arg-type]
        assert handle is not None
        await wait_for(lambda: len(session.calls) >= 2)
        await handle.stop()
        calls_at_stop = len(session.calls)

        await asyncio.sleep(0.05)

        assert len(session.calls) == calls_at_stop
        assert host.elements == [handle.element]

    @pytest.mark.asyncio
    async def test_multiple_widgets_are_independent(self) -> None:
        """Given two widgets on one host, when one stops, then the other keeps polling."""
        host = HtmlDocumentHost()
        first_session = FakeSession(ok(1))
        second_session = FakeSession(FakeResponse(status=503))

        first = await initialize(OPTIONS, host, session=first_session)  # type: ignore[arg-type]
        second = await initialize(
            {**OPTIONS, "propertyId": "456"},
            host,
            session=second_session,  # type: ignore[arg-type]
        )
        assert first is not None and second is not None
        try:
            await first.stop()
            calls_at_stop = len(second_session.calls)
            await wait_for(lambda: len(second_session.calls) > calls_at_stop)

            assert second.is_running
            assert len(second_session.calls) > calls_at_stop
            assert len(host.elements) == 2
        finally:
            await second.stop()

    @pytest.mark.asyncio
    async def test_handle_animation_end_clears_flash(self) -> None:
        """Given a flashing widget, when its animation ends, then the updated class is removed."""
        host = HtmlDocumentHost()
        session = FakeSession(ok(1), ok(2))

        handle = await initialize(OPTIONS, host, session=session)  # type: ignore[arg-type]
        assert handle is not None
        try:
            await wait_for(lambda: handle.element.is_updated)
        finally:
            await handle.stop()

        assert UPDATED_CLASS in handle.element.class_list
        handle.animation_end()
        assert UPDATED_CLASS not in handle.element.class_list


@pytest.mark.parametrize(
    ("position", "expected", "unexpected"),
    [
        (WidgetPosition.BOTTOM_RIGHT, ("bottom: 20px", "right: 20px"), ("top: 20px", "left: 20px")),
        (WidgetPosition.TOP_LEFT, ("top: 20px", "left: 20px"), ("bottom: 20px", "right: 20px")),
    ],
)
def test_stylesheet_pins_widget_to_corner(
    position: WidgetPosition, expected: tuple[str, ...], unexpected: tuple[str, ...]
) -> None:
    """Given a corner, when building the stylesheet, then only that corner's edges are set."""
    css = build_stylesheet(position)

    for rule in expected:
        assert rule in css
    for rule in unexpected:
        assert rule not in css
    assert "animation: ga-widget-flash 0.7s ease-out" in css


class TestHtmlDocumentHost:
    """Tests for HTML rendering."""

    def test_renders_widget_markup(self) -> None:
        """Given a mounted element, when rendering, then classes, title and value appear."""
        host = HtmlDocumentHost(page_title="Demo")
        host.inject_stylesheet(".x { color: red; }")
        element = WidgetElement(title="Online Users")
        element.show_value(5, flash=False)
        host.mount(element)

        html = host.render()

        assert "<title>Demo</title>" in html
        assert "<style>.x { color: red; }</style>" in html
        assert 'class="ga-active-users-widget"' in html
        assert 'title="Active users right now"' in html
        assert 'tabindex="0"' in html
        assert '<div class="ga-active-users-widget__title">Online Users</div>' in html
        assert '<div class="ga-active-users-widget__value">5</div>' in html

    def test_escapes_title(self) -> None:
        """Given a title with markup, when rendering, then it is escaped."""
        element = WidgetElement(title="<b>Users</b>")

        markup = HtmlDocumentHost.render_element(element)

        assert "&lt;b&gt;Users&lt;/b&gt;" in markup
        assert "<b>" not in markup

    def test_renders_error_classes(self) -> None:
        """Given an element in error, when rendering, then error classes are present."""
        element = WidgetElement(title="Online Users")
        element.show_error()

        markup = HtmlDocumentHost.render_element(element)

        assert 'class="ga-active-users-widget ga-active-users-widget--error"' in markup
        assert (
            'class="ga-active-users-widget__value ga-active-users-widget__error-msg">Error<'
            in markup
        )


class TestConsoleWidgetHost:
    """Tests for the terminal host."""

    def test_formats_value_flash_and_error(self) -> None:
        """Given element states, when formatting, then markers reflect them."""
        host = ConsoleWidgetHost(position=WidgetPosition.TOP_RIGHT, stream=io.StringIO())
        element = WidgetElement(title="Online Users")

        assert host.format_line(element) == "[top-right] Online Users: ..."
        element.show_value(4, flash=True)
        assert host.format_line(element) == "[top-right] Online Users: 4 *"
        element.show_error()
        assert host.format_line(element) == "[top-right] Online Users: Error * (!)"

    @pytest.mark.asyncio
    async def test_flash_ends_after_duration(self) -> None:
        """Given a flashing element, when refreshed, then the animation end is signalled later."""
        stream = io.StringIO()
        host = ConsoleWidgetHost(stream=stream, flash_duration=0.01)
        element = WidgetElement(title="Online Users")
        host.mount(element)
        element.show_value(4, flash=True)

        host.refresh(element)
        await asyncio.sleep(0.05)

        assert not element.is_updated
        assert stream.getvalue().splitlines() == ["Online Users: ...", "Online Users: 4 *"]


@pytest.mark.asyncio
async def test_when_interval_not_numeric_then_host_is_untouched(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Given a non-numeric reloadTimeInterval, when initializing, then None is returned and nothing is mounted."""
    host = HtmlDocumentHost()

    handle = await initialize({**OPTIONS, "reloadTimeInterval": "fast"}, host)

    assert handle is None
    assert host.stylesheets == []
    assert host.elements == []
    assert "reloadTimeInterval" in caplog.text


@pytest.mark.asyncio
async def test_handle_waits_for_first_poll() -> None:
    """Given a started widget, when waiting for the first poll, then its state is settled."""
    host = HtmlDocumentHost()
    session = FakeSession(FakeResponse(status=503))

    handle = await initialize(OPTIONS, host, session=session)  # type: ignore[arg-type]
    assert handle is not None
    try:
        await asyncio.wait_for(handle.wait_first_poll(), timeout=1)
    finally:
        await handle.stop()

    assert handle.state.status == "error"
    assert handle.element.value_text == "Error"
