from __future__ import annotations

from utils import options_filter


class RecentItemsController:
    """Re-renders the recent-items panel from its data set. Option: ``data``."""

    def __init__(self, view, **opts) -> None:
        self._view = view
        self.get_opt = options_filter(opts, {"data": "required"})

    def refresh(self) -> None:
        self._view.show_entries(list(self.get_opt("data")))


__all__ = ["RecentItemsController"]
