"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


SUPPORTED_BACKENDS = ("memory", "json", "sqlalchemy")


@dataclass(frozen=True)
class WalletStoreSettings:
    """Settings for selecting the wallet persistence backend.

    Attributes:
        backend: Backend identifier (memory, json, or sqlalchemy).
        store_path: Directory holding JSON wallet files.
    """

    backend: str = "memory"
    store_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "WalletStoreSettings":
        """Build settings from environment variables.

        Returns:
            WalletStoreSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("WALLET_STORE_BACKEND", "memory").strip().lower()
        raw_path = os.getenv("WALLET_STORE_PATH")
        logger = get_app_logger()
        if raw_path:
            store_path = cls._normalize_path(raw_path, logger=logger)
        else:
            store_path = get_project_root() / "data" / "wallets"
        return cls(backend=backend, store_path=store_path)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the JSON store directory.

        Args:
            raw_path: Raw directory path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute directory path.
        """
        path = Path(raw_path).expanduser().resolve()
        if path.exists() and not path.is_dir():
            logger.warning(f"Wallet store path is not a directory: {path}")
        return path


__all__ = ["WalletStoreSettings", "SUPPORTED_BACKENDS"]
