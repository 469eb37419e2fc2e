from docopt import docopt
from folds.fold import fold, scan, NO_SEED, EmptySequenceError
from folds.reducers import sumOf, kept, mapped, letterCounts, indexBy
from folds.dispatch import parse_action, calculator, printUnhandled, CALCULATOR
from folds.transduce import compose
from json import JSONEncoder, loads
import sys

json_encoder = JSONEncoder(ensure_ascii=False, sort_keys=True)
json_encode = lambda data: json_encoder.encode(data)
json_printr = compose(json_encode, print)

def steps_printr(steps):
    for step in steps:
        json_printr(step)

def err_printr(*args):
    print(*args, file=sys.stderr)

UI_USAGE = """
Folds

Usage:
  folds sum [--seed=<seed>] [--steps] [<n>...]
  folds count <text>
  folds calc [--seed=<seed>] [--steps] [--quiet] <action>...
  folds evens [--double] <n>...
  folds index <field> <json>

Options:
  --seed=<seed>  Initial accumulator. Omit to seed from the first element.
  --steps        Print every intermediate accumulator.
  --quiet        Do not report unhandled actions.
  --double       Double the kept numbers.
"""

def _seed(args, default=NO_SEED):
    seed = args['--seed']
    if seed is None:
        return default
    return int(seed)

def _run(iterable, combine, seed, steps):
    if steps:
        steps_printr(scan(iterable, combine, seed))
    else:
        json_printr(fold(iterable, combine, seed))

def ui_main():
    result = folds_ui(sys.argv[1:])
    sys.exit(result)

def folds_ui(argv):
    args = docopt(UI_USAGE, argv)
    try:
        if args['sum']:
            numbers = [int(n) for n in args['<n>']]
            _run(numbers, sumOf, _seed(args), args['--steps'])
        elif args['count']:
            json_printr(letterCounts(args['<text>']))
        elif args['calc']:
            actions = [parse_action(a, CALCULATOR) for a in args['<action>']]
            on_unhandled = None if args['--quiet'] else printUnhandled
            _run(actions, calculator(on_unhandled), _seed(args, 0), args['--steps'])
        elif args['evens']:
            numbers = [int(n) for n in args['<n>']]
            evens = kept(lambda n: n % 2 == 0, numbers)
            if args['--double']:
                evens = mapped(lambda n: n * 2, evens)
            json_printr(evens)
        elif args['index']:
            index = indexBy(args['<field>'], loads(args['<json>']))
            # JSON object keys are strings.
            json_printr({str(k): v for (k, v) in index.items()})
    except EmptySequenceError as e:
        err_printr("Error:", e)
        return 1
    except ValueError as e:
        err_printr("Error:", e)
        return 1
    except KeyError as e:
        err_printr("Error: missing field", e)
        return 1
    except TypeError as e:
        err_printr("Error:", e)
        return 1
    return 0
