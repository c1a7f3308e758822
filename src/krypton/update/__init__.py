"""Update — validators, appliers и dispatcher.

Единственный примитив перехода состояния — update(portfolio, transport).
"""

from .dispatcher import (
    BatchUpdateResult,
    PortfolioUpdater,
    UpdaterConfig,
    apply_all,
    update,
)
from .result import UpdateResult

__all__ = [
    "UpdateResult",
    "UpdaterConfig",
    "BatchUpdateResult",
    "PortfolioUpdater",
    "update",
    "apply_all",
]
