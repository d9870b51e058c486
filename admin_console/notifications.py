from dataclasses import asdict, dataclass, field
from typing import Any

from .constants import TOAST_AUTO_CLOSE_SECONDS
from .domain import ToastLevel

SESSION_TOASTS = "toasts"

@dataclass(frozen=True)
class Toast:
    level: ToastLevel
    message: str
    auto_close: float = TOAST_AUTO_CLOSE_SECONDS

@dataclass
class Notifier:
    """Collects the toasts a screen raises during one interaction."""

    toasts: list[Toast] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.toasts.append(Toast(ToastLevel.SUCCESS, message))

    def error(self, message: str) -> None:
        self.toasts.append(Toast(ToastLevel.ERROR, message))

    def drain(self) -> list[Toast]:
        toasts, self.toasts = self.toasts, []
        return toasts

def flash(session: dict[str, Any], toasts: list[Toast]) -> None:
    """Keep toasts in the session until the next rendered page."""
    pending = session.get(SESSION_TOASTS, [])
    pending.extend({**asdict(t), "level": t.level.value} for t in toasts)
    session[SESSION_TOASTS] = pending

def pop_flashed(session: dict[str, Any]) -> list[Toast]:
    raw = session.pop(SESSION_TOASTS, None) or []
    return [Toast(ToastLevel(t["level"]), t["message"], t.get("auto_close", TOAST_AUTO_CLOSE_SECONDS)) for t in raw]
