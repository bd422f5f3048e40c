from .gateway_client import GatewayClient
from .relay_service import RelayService

__all__ = ["GatewayClient", "RelayService"]
