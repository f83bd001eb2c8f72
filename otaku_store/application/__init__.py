"""Application layer: configuration and store wiring."""

from .config import Settings
from .store import OtakuStore, build_store, configure_logging

__all__ = ["OtakuStore", "Settings", "build_store", "configure_logging"]
