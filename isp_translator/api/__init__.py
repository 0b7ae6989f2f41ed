"""HTTP presentation layer (FastAPI routers and dependencies)."""
