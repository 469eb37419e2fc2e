from func_prototypes import typed, returned
from folds.fold import fold

sumOf = lambda acc, val: acc + val
sumOf.__doc__ = """Reducer which computes a sum"""

countOf = lambda acc, val: acc + 1
countOf.__doc__ = """Reducer which counts values, ignoring them."""

appendOf = lambda acc, val: acc + [val]
appendOf.__doc__ = """Reducer which builds a new list on every step."""

arrayOf = lambda acc, val: acc.append(val) or acc
arrayOf.__doc__ = \
"""
Optimized version of array accumulator which doesn't reallocate on every loop
iteration. Mutates acc, so only use it with a seed you own.
"""

def joinedWith(seperator):
    def joint(acc, val):
        if acc == '':
            return "%s" % val
        else:
            return "%s%s%s" % (acc, seperator, val)
    return joint

def frequencyOf(acc, val):
    """Reducer which counts occurrences of each value. acc is {value: count}."""
    out = dict(acc)
    out[val] = out.get(val, 0) + 1
    return out

def _field_getter(field):
    if callable(field):
        return field
    return lambda element: element[field]

def indexedBy(field):
    """
    Reducer which stores each element under field(element).
    field is a callable, or a key to look up on the element.
    Later elements overwrite earlier ones with the same key.
    """
    key = _field_getter(field)
    def indexer(acc, val):
        out = dict(acc)
        out[key(val)] = val
        return out
    return indexer

def transformAll(fn):
    def transformer(acc, val):
        return acc + [fn(val)]
    transformer.__name__ = "transformAll_" + getattr(fn, '__name__', 'fn')
    return transformer

def selectiveKeep(pred):
    def keeper(acc, val):
        if pred(val):
            return acc + [val]
        return acc
    keeper.__name__ = "selectiveKeep_" + getattr(pred, '__name__', 'pred')
    return keeper

def mapped(fn, iterable):
    return fold(iterable, transformAll(fn), [])

def kept(pred, iterable):
    return fold(iterable, selectiveKeep(pred), [])

def frequencies(iterable):
    return fold(iterable, frequencyOf, {})

def indexBy(field, iterable):
    return fold(iterable, indexedBy(field), {})

def total(iterable, seed=0):
    return fold(iterable, sumOf, seed)

@returned(list)
@typed(str)
def letters(text):
    """Splits text into its characters."""
    return fold(text, appendOf, [])

def letterCounts(text):
    return frequencies(letters(text))
