import random

from .dump import print_table
from .hashers import hash_string, hash_u8, hash_u64
from .shared import printf
from .table import Table

_MT_N = 624

WORDS_FIRST = [
    "The", "Ultimate", "question", "of", "Life", "the", "Universe", "and",
    "Everything",
]
WORDS_SECOND = [
    "Nothing", "everything", "anything", "something", "if", "you", "have",
    "nothing", "then", "you", "have", "the", "freedom", "to", "do", "anything",
    "without", "the", "fear", "of", "losing", "something",
]
WORDS_REMOVE = ["the", "anything", "the", "nothing", "of", "anybody", "not", "", "of"]


def mt19937(seed: int) -> random.Random:
    """Mersenne Twister seeded the way C++ std::mt19937(seed) is.

    random.Random.seed() mixes the seed through init_by_array, so the
    state is built with init_genrand and loaded directly. getrandbits(32)
    then yields the raw 32-bit outputs.
    """
    mt = [seed & 0xFFFFFFFF]
    for i in range(1, _MT_N):
        prev = mt[i - 1]
        mt.append((1812433253 * (prev ^ (prev >> 30)) + i) & 0xFFFFFFFF)

    rand = random.Random()
    rand.setstate((3, tuple(mt + [_MT_N]), None))
    return rand


def random_byte(rand: random.Random) -> int:
    return rand.getrandbits(32) & 0xFF


def run_integer_demo(
    table: Table[int], rand: random.Random, remove_below: int
):
    print_table(table)

    for i in range(5):
        table.insert(i)
    print_table(table)
    printf("\n")

    for _ in range(20):
        table.insert(random_byte(rand))
    print_table(table)
    printf("\n")

    for i in range(remove_below):
        if table.contains(i):
            table.remove(i)
    print_table(table)
    printf("\n")


def run_string_demo(table: Table[str]):
    print_table(table)

    for word in WORDS_FIRST:
        table.insert(word)
    print_table(table)
    printf("\n")

    for word in WORDS_SECOND:
        table.insert(word)
    print_table(table)
    printf("\n")

    for word in WORDS_REMOVE:
        if table.contains(word):
            table.remove(word)
    print_table(table)
    printf("\n")


def main():
    rand = mt19937(0)

    run_integer_demo(Table(5, 75, hash_u8), rand, remove_below=50)
    run_integer_demo(Table(5, 100, hash_u64), rand, remove_below=100)
    run_string_demo(Table(5, 50, hash_string))
