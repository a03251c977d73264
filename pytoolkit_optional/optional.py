"""
値が存在しない可能性を表すコンテナ型のモジュール。

呼び出し側で毎回Noneチェックを書かずに、値の変換・絞り込み・既定値の解決を
メソッドチェーンで記述できるようにする。値の不在はチェーンの途中では例外にならず、
get()やor_else_throw()などの取り出し地点で初めて扱われる。
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Final, Generic, TypeVar, cast

from .exceptions import NoSuchElementError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<ABSENT>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final[_Absent] = _Absent()

NilType = None | _Absent
Consumer = Callable[[T], None]
Predicate = Callable[[T], bool]
Mapper = Callable[[T], U]
Supplier = Callable[[], U]


def is_nil(value: object) -> bool:
    """Return True if value represents "no value" (None or ABSENT)."""
    return value is None or value is ABSENT


@dataclass(frozen=True, repr=False)
class Optional(Generic[T]):
    """
    存在しないかもしれない値を保持する不変のコンテナ。

    インスタンスはファクトリメソッド(empty, of, of_nullable)で生成する。
    コンストラクタを直接呼び出す(Optional(x))ことはサポートしない。
    内部スロットがABSENTであれば空、それ以外であれば値を保持している。
    False、0、空文字列、空のコレクションも値として扱う。
    """

    _value: T | _Absent

    _EMPTY: ClassVar["Optional[Any]"]

    def __post_init__(self) -> None:
        if self._value is None:
            object.__setattr__(self, "_value", ABSENT)

    def __repr__(self) -> str:
        if self._value is ABSENT:
            return "Optional.empty()"
        return f"Optional.of({self._value!r})"

    @classmethod
    def empty(cls) -> "Optional[Any]":
        return Optional._EMPTY

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """
        値をそのまま包んだOptionalを返す。

        値の有無は検査しない。Noneを渡した場合は空のOptionalになる。
        """
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None = None) -> "Optional[T]":
        if is_nil(value):
            return cls.empty()
        return cls.of(cast(T, value))

    def _apply_if_present(
        self, effect: Callable[[T], "Optional[U]"]
    ) -> "Optional[U]":
        if self._value is ABSENT:
            return Optional.empty()
        return effect(cast(T, self._value))

    def is_present(self) -> bool:
        return self._value is not ABSENT

    def is_empty(self) -> bool:
        return self._value is ABSENT

    def if_present(self, consumer: Consumer[T]) -> None:
        if self._value is not ABSENT:
            consumer(cast(T, self._value))

    def get(self) -> T:
        """
        保持している値を返す。

        Raises:
            NoSuchElementError: 空のOptionalに対して呼び出した場合
        """
        if self._value is ABSENT:
            return self.or_else_throw(NoSuchElementError())
        return cast(T, self._value)

    def or_else(self, other: U) -> T | U:
        if self._value is ABSENT:
            return other
        return cast(T, self._value)

    def or_else_get(self, supplier: Supplier[U]) -> T | U:
        if self._value is ABSENT:
            return supplier()
        return cast(T, self._value)

    def or_else_throw(self, exception: BaseException) -> T:
        """
        保持している値を返す。空の場合は渡された例外をそのまま送出する。

        Args:
            exception: 空のときに送出する例外インスタンス
        """
        if self._value is ABSENT:
            logger.debug(
                "Unwrapped an empty Optional, raising %s",
                type(exception).__name__,
            )
            raise exception
        return cast(T, self._value)

    def filter(self, predicate: Predicate[T]) -> "Optional[T]":
        return self._apply_if_present(
            lambda value: Optional.of(value) if predicate(value) else Optional.empty()
        )

    def map(self, mapper: Mapper[T, U]) -> "Optional[U]":
        return self._apply_if_present(lambda value: Optional.of(mapper(value)))

    def flat_map(self, mapper: Mapper[T, "Optional[U]"]) -> "Optional[U]":
        """mapperが返したOptionalを入れ子にせずそのまま返す。"""
        return self._apply_if_present(mapper)


Optional._EMPTY = Optional(ABSENT)
