import logging
from contextlib import contextmanager
from typing import Iterator, List, Literal, Union

from .state import ChecklistState, Notice, ViewState

logger = logging.getLogger(__name__)


class BaseController:
    """Shared notice queue and busy gate for the view controllers."""

    state: Union[ViewState, ChecklistState]

    def notify(self, text: str, level: Literal["info", "error"] = "info") -> None:
        self.state.notices.append(Notice(level=level, text=text))

    def drain_notices(self) -> List[Notice]:
        """Return pending notices and clear the queue."""
        notices = list(self.state.notices)
        self.state.notices.clear()
        return notices

    def reject_if_busy(self, action: str) -> bool:
        """
        Refuse to start a mutation while another is in flight.

        Returns:
            True when the action must not run.
        """
        if self.state.is_busy:
            logger.warning(f"Ignoring {action}: another change is in progress")
            self.notify("⏳ 이전 작업이 아직 진행 중입니다.", "error")
            return True
        return False

    @contextmanager
    def busy(self) -> Iterator[None]:
        self.state.is_busy = True
        try:
            yield
        finally:
            self.state.is_busy = False
