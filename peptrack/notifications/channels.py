"""Channel protocols: interfaces for native and in-app notification delivery."""

from typing import Protocol, runtime_checkable

from peptrack.notifications.presets import Severity


@runtime_checkable
class NativeNotifier(Protocol):
    """OS-level notification channel. Best effort; may be unavailable."""

    @property
    def name(self) -> str:
        """Unique channel identifier (e.g. 'desktop')."""
        ...

    async def notify(self, title: str, body: str, tag: str | None = None) -> bool:
        """Show an OS notification. Returns True on success; may also raise."""
        ...


@runtime_checkable
class ToastSink(Protocol):
    """In-app toast channel, the fallback when native delivery fails."""

    async def toast(self, body: str, severity: Severity = "info") -> None:
        """Show an in-app toast."""
        ...
