"""ISP name translation service: tiered cache-aside lookup in front of an LLM provider."""

__version__ = "1.0.0"
