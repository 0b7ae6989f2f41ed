"""Infrastructure adapters: edge cache, persistence, provider, background tasks."""
