"""Document provider lookup."""

from .registry import LOCAL_PROVIDER, ProviderInfo, ProviderRegistry, ProvidersAccess

__all__ = ["LOCAL_PROVIDER", "ProviderInfo", "ProviderRegistry", "ProvidersAccess"]
