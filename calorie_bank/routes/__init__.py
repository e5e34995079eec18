"""HTTP routers mounted under ``/v2``."""
