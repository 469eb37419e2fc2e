from typing import TypeVar, Callable, Iterable, Iterator

A = TypeVar("A")
E = TypeVar("E")
Reducer = Callable[[A, E], A]


class EmptySequenceError(ValueError):
    """Raised when folding an empty sequence without a seed."""
    def __init__(self, msg="fold of empty sequence with no seed"):
        super().__init__(msg)


class _NoSeed:
    def __repr__(self):
        return "<no seed>"


NO_SEED = _NoSeed()


def reduceWith(reducer: Reducer[A, E], seed: A, iterable: Iterable[E]) -> A:
    """
    reduceWith takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell.
    reducer is (b -> a -> b)
    Seed is b
    iterable is [a]
    reduceWith is (b -> a -> b) -> b -> [a] -> b
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
    return accumulation


def reduce1(reducer: Reducer[E, E], iterable: Iterable[E]) -> E:
    """
    Unseeded reduction. The first value of iterable is the seed.
    reduce1 is (a -> a -> a) -> [a] -> a
    """
    i = iter(iterable)
    try:
        first = next(i)
    except StopIteration:
        raise EmptySequenceError() from None
    return reduceWith(reducer, first, i)


def fold(iterable: Iterable[E], combine: Reducer[A, E], seed: A = NO_SEED) -> A:
    """
    Left fold of iterable with combine, starting from seed.
    When seed is omitted the first element seeds the fold, and an empty
    iterable raises EmptySequenceError. Any value, None included, is a seed.
    """
    if seed is NO_SEED:
        return reduce1(combine, iterable)
    return reduceWith(combine, seed, iterable)


def scan(iterable: Iterable[E], combine: Reducer[A, E], seed: A = NO_SEED) -> Iterator[A]:
    """Yields every accumulation of fold, the seed first."""
    i = iter(iterable)
    if seed is NO_SEED:
        try:
            accumulation = next(i)
        except StopIteration:
            raise EmptySequenceError() from None
    else:
        accumulation = seed
    yield accumulation
    for value in i:
        accumulation = combine(accumulation, value)
        yield accumulation
