"""Activity notifier writing wallet messages to the usage log."""

from src.application.ports.activity import ActivityNotifierPort
from src.infrastructure.logging.logger import get_usage_logger


class UsageLogActivityNotifier(ActivityNotifierPort):
    """Publish activity messages through the usage logger."""

    def __init__(self, logger=None) -> None:
        """Initialize the notifier.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_usage_logger()

    def publish(self, wallet_id: str, message: str) -> None:
        self._logger.info(f"[wallet={wallet_id}] {message}")


__all__ = ["UsageLogActivityNotifier"]
