"""Router error classes.

These errors map to the failure codes of the constant-product router
library (IDENTICAL_ADDRESSES, INSUFFICIENT_LIQUIDITY, INVALID_PATH, ...).
Arithmetic overflow lives with SafeInt in amm_router.safe_int.
"""


class RouterError(Exception):
    """Base error for pricing and routing operations."""

    pass


class IdenticalAssets(RouterError):
    """Both assets of a pair are the same."""

    pass


class ZeroAsset(RouterError):
    """The lower-ordered asset of a pair is the zero address."""

    pass


class InsufficientAmount(RouterError):
    """Quote amount must be positive."""

    pass


class InsufficientInputAmount(RouterError):
    """Swap input amount must be positive."""

    pass


class InsufficientOutputAmount(RouterError):
    """Swap output amount must be positive."""

    pass


class InsufficientLiquidity(RouterError):
    """Pool reserves cannot service the request."""

    pass


class InvalidPath(RouterError):
    """A swap path needs at least two assets."""

    pass


class InvalidFeeRate(RouterError):
    """Fee rate must be in range [0, 1000)."""

    pass
