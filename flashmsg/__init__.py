"""Session-backed flash messages for FastAPI applications."""
