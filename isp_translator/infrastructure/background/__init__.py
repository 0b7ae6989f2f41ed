"""Background work with an owned lifetime (write-back after the response)."""

from isp_translator.infrastructure.background.task_registry import BackgroundTaskRegistry

__all__ = ["BackgroundTaskRegistry"]
