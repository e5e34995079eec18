"""FastAPI-facing infrastructure: API key security and dependency wiring."""

from .security import api_key_header, verify_api_key

__all__ = ["api_key_header", "verify_api_key"]
