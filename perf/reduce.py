import functools
import timeit
from tabulate import tabulate
from folds.fold import fold, reduceWith, reduce1
from folds.reducers import sumOf, arrayOf, appendOf
from folds.transduce import transduce, compose, map as transmap, filter as transfilter

def plus(x, y):
    return x + y

def isEven(n):
    return n % 2 == 0

def sum_functools(ns):
    return functools.reduce(plus, ns, 0)

def sum_fold(ns):
    return fold(ns, plus, 0)

def sum_reduce1(ns):
    return reduce1(plus, ns)

def sum_loop(ns):
    total = 0
    for n in ns:
        total += n
    return total

def evens_appendOf(ns):
    return reduceWith(transfilter(isEven)(appendOf), [], ns)

def evens_arrayOf(ns):
    return reduceWith(transfilter(isEven)(arrayOf), [], ns)

def evens_comprehension(ns):
    return [n for n in ns if isEven(n)]

def double_evens_transduce(ns):
    return transduce(compose(transmap(lambda n: n * 2), transfilter(isEven)), arrayOf, [], ns)

def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = functools.partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def test_sum():
    performance_compare(
        sum_functools,
        sum_fold,
        sum_reduce1,
        sum_loop,
        case_args=[list(range(10000))],
        timeit_kwargs=dict(number=100))

# appendOf copies the accumulator on every step, so keep the input small.
def test_evens():
    performance_compare(
        evens_appendOf,
        evens_arrayOf,
        evens_comprehension,
        double_evens_transduce,
        case_args=[list(range(1000))],
        timeit_kwargs=dict(number=100))
