"""Router configuration."""

import os
from dataclasses import dataclass

# Fees are expressed in thousandths (30 = 3%). Fixed: the swap formulas and
# FeeInToken validation both depend on it.
FEE_SCALE = 1000


@dataclass(frozen=True)
class RouterConfig:
    """Centralized configuration for the pricing engine.

    Attributes:
        log_level: Minimum structlog level name (default: INFO)
    """

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "RouterConfig":
        """Build a config from environment variables.

        - AMM_ROUTER_LOG_LEVEL: Log level name (default: INFO)
        """
        return cls(log_level=os.environ.get("AMM_ROUTER_LOG_LEVEL", "INFO").upper())


# Default configuration instance
DEFAULT_ROUTER_CONFIG = RouterConfig()
