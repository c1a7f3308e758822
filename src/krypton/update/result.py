"""UpdateResult — результат шага обновления (успех или ошибка)."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from krypton.core.errors import UpdateError


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class UpdateResult(Generic[T]):
    """
    Результат validate/apply/update.

    Ровно одно из полей заполнено: value при успехе, error при ошибке.
    and_then() связывает шаги: первая ошибка выигрывает, следующие шаги
    не выполняются.
    """

    value: Optional[T] = None
    error: Optional[UpdateError] = None

    @classmethod
    def success(cls, value: T) -> "UpdateResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: UpdateError) -> "UpdateResult[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get(self) -> T:
        """
        Значение при успехе.

        Raises:
            UpdateError: ошибка, которую несёт результат
        """
        if self.error is not None:
            raise self.error
        return self.value

    def and_then(self, fn: Callable[[T], "UpdateResult[U]"]) -> "UpdateResult[U]":
        if self.error is not None:
            return UpdateResult.failure(self.error)
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> "UpdateResult[U]":
        if self.error is not None:
            return UpdateResult.failure(self.error)
        return UpdateResult.success(fn(self.value))
