import re

import pytest

from algokit.timing import main, time_nested_loops


def test_zero_iterations_is_non_negative():
    assert time_nested_loops(0, 0, 0) >= 0.0


def test_small_loop_is_measured():
    elapsed = time_nested_loops(3, 4, 5)
    assert 0.0 <= elapsed < 5.0


def test_main_prints_report(capsys):
    assert main(["--outer", "2", "--middle", "3", "--inner", "4"]) == 0
    out = capsys.readouterr().out
    match = re.fullmatch(r"Execution time for the for loop: (\S+) seconds\n", out)
    assert match is not None
    assert float(match.group(1)) >= 0.0


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit):
        main(["--outer", "many"])