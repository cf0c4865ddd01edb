from dataclasses import dataclass
import enum
from typing import Generic, Iterator, TypeVar

from .hashers import Hasher
from .shared import printf_err

T = TypeVar("T")

MIN_BUCKET_COUNT = 1
GROWTH_FACTOR = 3


_debug_trace_growth = False


def set_debug_trace_growth(b: bool):
    global _debug_trace_growth
    _debug_trace_growth = b


class InvalidConfiguration(ValueError):
    pass


class TableState(enum.Enum):
    EMPTY = enum.auto()
    POPULATED = enum.auto()
    FULL_THRESHOLD = enum.auto()


@dataclass
class Table(Generic[T]):
    """Multiset of values kept in separately chained buckets.

    `capacity` is the element count at which the next insert grows the
    bucket array. Growth sets it to the new bucket count.
    """

    used: int
    capacity: int
    load_factor_percent: int
    hasher: Hasher[T]
    buckets: tuple[list[T], ...]

    def __init__(
        self, capacity: int, load_factor_percent: int, hasher: Hasher[T]
    ) -> None:
        if capacity < 1:
            raise InvalidConfiguration("capacity should be positive", capacity)
        if load_factor_percent < 1:
            raise InvalidConfiguration(
                "load factor percent should be positive", load_factor_percent
            )

        self.used = 0
        self.capacity = capacity
        self.load_factor_percent = load_factor_percent
        self.hasher = hasher

        # capacity * load_factor_percent < 100 would give no buckets at all
        bucket_count = max(capacity * load_factor_percent // 100, MIN_BUCKET_COUNT)
        self.buckets = new_buckets(bucket_count)

    @property
    def bucket_count(self) -> int:
        return len(self.buckets)

    def insert(self, value: T) -> None:
        if self.used == self.capacity:
            self._grow()

        self.find_chain(self.buckets, value).append(value)
        self.used += 1

    def contains(self, value: T) -> bool:
        return value in self.find_chain(self.buckets, value)

    def remove(self, value: T) -> bool:
        chain = self.find_chain(self.buckets, value)
        for i, stored in enumerate(chain):
            if stored == value:
                del chain[i]
                self.used -= 1
                return True
        return False

    def values(self) -> Iterator[T]:
        for chain in self.buckets:
            yield from chain

    def state(self) -> TableState:
        if self.used == 0:
            return TableState.EMPTY
        if self.used == self.capacity:
            return TableState.FULL_THRESHOLD
        return TableState.POPULATED

    def bucket_index(self, value: T) -> int:
        return self.index_in(self.buckets, value)

    def index_in(self, buckets: tuple[list[T], ...], value: T) -> int:
        return self.hasher(value) % len(buckets)

    def find_chain(self, buckets: tuple[list[T], ...], value: T) -> list[T]:
        return buckets[self.index_in(buckets, value)]

    def _grow(self):
        bucket_count = self.capacity * GROWTH_FACTOR
        grown = new_buckets(bucket_count)

        for value in self.values():
            self.find_chain(grown, value).append(value)

        if _debug_trace_growth:
            printf_err(
                "grow: chains {0:d} -> {1:d}, elements {2:d}\n",
                len(self.buckets),
                bucket_count,
                self.used,
            )

        self.buckets = grown
        self.capacity = bucket_count


def new_buckets(count: int) -> tuple[list, ...]:
    return tuple([] for _ in range(count))
