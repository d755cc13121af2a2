from blossom_server.observability.logging import configure_logging

__all__ = ["configure_logging"]
