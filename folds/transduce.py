# Worked out from https://raganwald.com/2017/04/30/transducers.html
from folds.fold import fold, reduceWith

map = lambda fn: lambda reducer: lambda acc, val: reducer(acc, fn(val))
map.__doc__ = """map is decorator which parameterizes the (+1) as a parameter."""

filter = lambda pred: \
        lambda reducer: \
        lambda acc, val: reducer(acc, val) if pred(val) else acc
filter.__doc__ =  \
"""
pred is (a->Bool)
reducer is (b -> a -> b)
"""

identity = lambda x: x

"""
How can we perform an arbitrary series of compositions?
Yes, with a reduction!
"""
compositionOf = lambda acc, val: lambda *args, **kwargs: val(acc(*args, **kwargs))
compose = lambda *fns: reduceWith(compositionOf, identity, fns)

def transduce(transformer, reducer, seed, iterable):
    """
    transformer is ((b -> a -> b) -> (b -> a -> b))
    reducer is (b -> a -> b)
    seed is b
    iterable is [a]
    """
    return fold(iterable, transformer(reducer), seed)
