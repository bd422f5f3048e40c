from .gateway import GatewayResult

__all__ = ["GatewayResult"]
