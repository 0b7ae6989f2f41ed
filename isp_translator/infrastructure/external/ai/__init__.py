"""AI transformation provider (OpenAI-compatible chat completions)."""

from isp_translator.infrastructure.external.ai.chat_completion_provider import (
    ChatCompletionProvider,
    build_system_prompt,
)

__all__ = ["ChatCompletionProvider", "build_system_prompt"]
