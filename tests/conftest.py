import pytest
from folds.dispatch import Action


@pytest.fixture
def one2ten():
    return list(range(1, 10 + 1))


@pytest.fixture
def calc_actions():
    return [Action('ADD', 1), Action('ADD', 2), Action('SUBTRACT', 1), Action('ADD', 3)]


def build_records(*pairs):
    """
    Helper function to build keyed records.
    Returns a list of {k:, v:} dicts in the order given.
    """
    return [dict(k=k, v=v) for (k, v) in pairs]
