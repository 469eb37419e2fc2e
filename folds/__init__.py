from folds.fold import fold, reduceWith, reduce1, scan, EmptySequenceError
from folds.reducers import \
    appendOf,      \
    arrayOf,       \
    countOf,       \
    frequencies,   \
    frequencyOf,   \
    indexBy,       \
    indexedBy,     \
    joinedWith,    \
    kept,          \
    letterCounts,  \
    letters,       \
    mapped,        \
    selectiveKeep, \
    sumOf,         \
    total,         \
    transformAll
from folds.dispatch import Action, action, dispatcher, calculator, printUnhandled
from folds.store import Store
