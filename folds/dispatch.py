from collections import namedtuple
from delnone import delnone
from func_prototypes import constructors
import sys


class Action(namedtuple('Action', ['type', 'payload'])):
    """Tagged action. type is the discriminant, payload is its argument."""
    __slots__ = ()

    def __new__(cls, type, payload=None):
        return super(Action, cls).__new__(cls, type, payload)

    def to_dict(self):
        return delnone(dict(type=self.type, payload=self.payload))


@constructors(str, int)
def action(type, payload=None):
    return Action(type, payload)


def parse_action(text, needs_payload=()):
    """
    Parses TYPE:N (or a bare TYPE) into an Action.
    Raises ValueError when the payload is not an integer, or when a type in
    needs_payload has none.
    """
    type_, sep, payload = text.partition(":")
    if not type_:
        raise ValueError("Action has no type: %r" % text)
    if sep:
        try:
            return action(type_, payload)
        except ValueError:
            raise ValueError("Action payload must be an integer: %r" % text) from None
    if type_ in needs_payload:
        raise ValueError("Action %s requires a payload" % type_)
    return action(type_)


def printUnhandled(acc, action):
    print("Unhandled action", action.type, file=sys.stderr)


def dispatcher(transitions, on_unhandled=None):
    """
    Builds a reducer (acc, action) -> acc from transitions, a mapping of
    action type to (acc, payload) -> acc.
    Unknown action types return acc unchanged, after calling
    on_unhandled(acc, action) when it is given.
    """
    transitions = dict(transitions)
    def dispatch(acc, action):
        transition = transitions.get(action.type)
        if transition is None:
            if on_unhandled is not None:
                on_unhandled(acc, action)
            return acc
        return transition(acc, action.payload)
    return dispatch


def ADD(acc, n):
    return acc + n

def SUBTRACT(acc, n):
    return acc - n


CALCULATOR = {
    'ADD': ADD,
    'SUBTRACT': SUBTRACT,
}

def calculator(on_unhandled=None):
    return dispatcher(CALCULATOR, on_unhandled)
