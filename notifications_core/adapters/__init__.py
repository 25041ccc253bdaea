"""サンプルアダプタ"""

from notifications_core.adapters.memory import (
    InMemoryEmailProvider,
    InMemoryPushProvider,
    InMemorySMSProvider,
)

__all__ = [
    "InMemoryEmailProvider",
    "InMemoryPushProvider",
    "InMemorySMSProvider",
]
