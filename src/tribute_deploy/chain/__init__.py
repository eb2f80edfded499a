from .client import Web3ChainClient

__all__ = ["Web3ChainClient"]
