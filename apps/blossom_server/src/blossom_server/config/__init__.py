from blossom_server.config.settings import Settings

__all__ = ["Settings"]
