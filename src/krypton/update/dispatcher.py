"""
Dispatcher — единая точка входа для изменения портфеля.

update(portfolio, transport):
1. PositionTransport → поиск позиции → position validate/apply → новый портфель
2. PortfolioTransport → portfolio validate/apply
3. Иначе → UnknownUpdate

Входной портфель никогда не изменяется: возвращается новый Portfolio
или ошибка. Последовательность обновлений — apply_all().
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from krypton.core.domain.portfolio import Portfolio
from krypton.core.errors import PositionDoesNotExist, UnknownUpdate, UpdateError
from krypton.protocol.portfolio import PortfolioTransport
from krypton.protocol.position import PositionTransport
from krypton.protocol.transport import Transport
from krypton.update import portfolio as portfolio_updates
from krypton.update import position as position_updates
from krypton.update.result import UpdateResult


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class UpdaterConfig:
    """Конфигурация PortfolioUpdater.

    - max_batch_size: максимальная длина пакета для apply_all (None — без лимита)
    - rejection_log_level: уровень логирования отклонённых обновлений
    """
    max_batch_size: Optional[int] = None
    rejection_log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if self.max_batch_size is not None and self.max_batch_size <= 0:
            raise ValueError(f"max_batch_size must be positive, got {self.max_batch_size}")


# =============================================================================
# BATCH RESULT
# =============================================================================


@dataclass(frozen=True)
class BatchUpdateResult:
    """Результат apply_all."""

    # Последнее успешное состояние (исходное, если упал первый transport)
    portfolio: Portfolio
    applied_count: int

    # Ошибка (если была)
    failed_index: Optional[int]
    error: Optional[UpdateError]

    details: str

    @property
    def is_success(self) -> bool:
        return self.error is None


# =============================================================================
# UPDATER
# =============================================================================


class PortfolioUpdater:
    """Маршрутизация transports к нужной сущности и validate-then-apply.

    Stateless: хранит только конфигурацию, поэтому один экземпляр
    можно использовать для любого количества портфелей.
    """

    def __init__(self, config: Optional[UpdaterConfig] = None):
        """
        Args:
            config: конфигурация (по умолчанию UpdaterConfig())
        """
        self.config = config or UpdaterConfig()

    def update(self, state: Portfolio, transport: Transport) -> UpdateResult[Portfolio]:
        """Применение одного transport к портфелю.

        Args:
            state: текущий портфель (не изменяется)
            transport: PositionTransport или PortfolioTransport

        Returns:
            UpdateResult с новым портфелем или ошибкой
        """
        result = self._dispatch(state, transport)
        if result.is_success:
            logger.debug("Update applied: %s", transport)
        else:
            logger.log(
                self.config.rejection_log_level,
                "Update rejected: %s (%s)",
                result.error,
                type(result.error).__name__,
            )
        return result

    def apply_all(self, state: Portfolio, transports: Iterable[Transport]) -> BatchUpdateResult:
        """Последовательное применение transports до первой ошибки.

        Args:
            state: исходный портфель
            transports: transports в порядке применения

        Returns:
            BatchUpdateResult с последним успешным портфелем

        Raises:
            ValueError: если пакет длиннее config.max_batch_size
        """
        batch = list(transports)
        limit = self.config.max_batch_size
        if limit is not None and len(batch) > limit:
            raise ValueError(f"Batch of {len(batch)} updates exceeds max_batch_size {limit}")

        current = state
        for index, transport in enumerate(batch):
            result = self.update(current, transport)
            if result.is_failure:
                return BatchUpdateResult(
                    portfolio=current,
                    applied_count=index,
                    failed_index=index,
                    error=result.error,
                    details=f"Update {index} of {len(batch)} failed: {result.error}",
                )
            current = result.value

        return BatchUpdateResult(
            portfolio=current,
            applied_count=len(batch),
            failed_index=None,
            error=None,
            details=f"Applied {len(batch)} updates",
        )

    def _dispatch(self, state: Portfolio, transport: Transport) -> UpdateResult[Portfolio]:
        if isinstance(transport, PositionTransport):
            isin = transport.isin
            position = state.get_position(isin)
            if position is None:
                return UpdateResult.failure(PositionDoesNotExist(isin))
            return position_updates.update(position, transport.update).map(
                lambda updated: state.with_positions({**state.positions, isin: updated})
            )

        if isinstance(transport, PortfolioTransport):
            return portfolio_updates.update(state, transport.update)

        return UpdateResult.failure(UnknownUpdate(transport))


# Экземпляр по умолчанию для module-level функций
_DEFAULT_UPDATER = PortfolioUpdater()


def update(state: Portfolio, transport: Transport) -> UpdateResult[Portfolio]:
    """Применение transport к портфелю с конфигурацией по умолчанию."""
    return _DEFAULT_UPDATER.update(state, transport)


def apply_all(state: Portfolio, transports: Iterable[Transport]) -> BatchUpdateResult:
    return _DEFAULT_UPDATER.apply_all(state, transports)
