from .async_client import AsyncKittyClient

__all__ = ["AsyncKittyClient"]
