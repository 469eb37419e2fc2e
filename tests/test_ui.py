import pytest
from folds.ui import folds_ui
from json import loads

def test_folds_sum(capsys):
    r = folds_ui(['sum', '1', '2', '3'])
    captured = capsys.readouterr()
    assert captured.out == "6\n"
    assert captured.err == ""
    assert r == 0

def test_folds_sum_seed(capsys):
    r = folds_ui(['sum', '--seed=10', '1', '2'])
    captured = capsys.readouterr()
    assert captured.out == "13\n"
    assert r == 0
    r = folds_ui(['sum', '--seed=4'])
    captured = capsys.readouterr()
    assert captured.out == "4\n"
    assert r == 0

def test_folds_sum_empty(capsys):
    r = folds_ui(['sum'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: fold of empty sequence with no seed\n"
    assert r == 1

def test_folds_sum_steps(capsys):
    r = folds_ui(['sum', '--steps', '--seed=0', '1', '2', '3'])
    captured = capsys.readouterr()
    assert captured.out == "0\n1\n3\n6\n"
    assert r == 0
    r = folds_ui(['sum', '--steps', '1', '2'])
    captured = capsys.readouterr()
    assert captured.out == "1\n3\n"
    assert r == 0

def test_folds_sum_bad_number(capsys):
    r = folds_ui(['sum', '1', 'two'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")
    assert r == 1

def test_folds_count(capsys):
    r = folds_ui(['count', 'aab'])
    captured = capsys.readouterr()
    assert loads(captured.out) == {'a': 2, 'b': 1}
    assert r == 0

def test_folds_calc(capsys):
    r = folds_ui(['calc', 'ADD:1', 'ADD:2', 'SUBTRACT:1', 'ADD:3'])
    captured = capsys.readouterr()
    assert captured.out == "5\n"
    assert captured.err == ""
    assert r == 0

def test_folds_calc_unhandled(capsys):
    r = folds_ui(['calc', 'ADD:1', 'ADD:2', 'MULTIPLY:2', 'SUBTRACT:1', 'ADD:3'])
    captured = capsys.readouterr()
    assert captured.out == "5\n"
    assert captured.err == "Unhandled action MULTIPLY\n"
    assert r == 0
    r = folds_ui(['calc', '--quiet', 'ADD:1', 'MULTIPLY:2'])
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert captured.err == ""
    assert r == 0

def test_folds_calc_steps(capsys):
    r = folds_ui(['calc', '--steps', '--seed=10', 'ADD:1', 'SUBTRACT:5'])
    captured = capsys.readouterr()
    assert captured.out == "10\n11\n6\n"
    assert r == 0

def test_folds_calc_bad_action(capsys):
    r = folds_ui(['calc', 'ADD:x'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "must be an integer" in captured.err
    assert r == 1

def test_folds_evens(capsys):
    r = folds_ui(['evens', '1', '2', '3', '4', '5', '6', '7', '8', '9', '10'])
    captured = capsys.readouterr()
    assert loads(captured.out) == [2, 4, 6, 8, 10]
    assert r == 0
    r = folds_ui(['evens', '--double', '1', '2', '3', '4', '5', '6', '7', '8', '9', '10'])
    captured = capsys.readouterr()
    assert loads(captured.out) == [4, 8, 12, 16, 20]
    assert r == 0

def test_folds_index(capsys):
    r = folds_ui(['index', 'k', '[{"k": "x", "v": 1}, {"k": "y", "v": 2}]'])
    captured = capsys.readouterr()
    assert loads(captured.out) == {'x': {'k': 'x', 'v': 1}, 'y': {'k': 'y', 'v': 2}}
    assert r == 0

def test_folds_index_bad_json(capsys):
    r = folds_ui(['index', 'k', '[{'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")
    assert r == 1

def test_folds_usage():
    with pytest.raises(SystemExit):
        folds_ui(['bogus'])

def test_folds_calc_missing_payload(capsys):
    r = folds_ui(['calc', 'ADD'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Action ADD requires a payload\n"
    assert r == 1

def test_folds_calc_bare_unknown_action(capsys):
    r = folds_ui(['calc', 'ADD:2', 'RESET'])
    captured = capsys.readouterr()
    assert captured.out == "2\n"
    assert captured.err == "Unhandled action RESET\n"
    assert r == 0

def test_folds_index_missing_field(capsys):
    r = folds_ui(['index', 'zz', '[{"k": "x"}]'])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: missing field 'zz'\n"
    assert r == 1

def test_folds_index_not_records(capsys):
    for doc in ['5', '["a", "b"]']:
        r = folds_ui(['index', 'k', doc])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error:")
        assert r == 1

def test_folds_index_mixed_keys(capsys):
    r = folds_ui(['index', 'v', '[{"v": 1}, {"v": "a"}]'])
    captured = capsys.readouterr()
    assert loads(captured.out) == {'1': {'v': 1}, 'a': {'v': 'a'}}
    assert captured.err == ""
    assert r == 0
