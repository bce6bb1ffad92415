import pytest

from nekome.cli.command import Command
from nekome.cli.flags import CliError
from nekome.cli.validate import no_args, range_args, require_args


def make_root(validator, calls):
    test = Command(name="test", validate=validator, run=lambda c, f: calls.append(f.args()))
    root = Command(name="root", run=lambda c, f: None)
    root.add_command(test)
    return root


def test_no_args():
    calls = []
    root = make_root(no_args(), calls)
    root.execute(["test"])
    assert calls == [[]]
    with pytest.raises(CliError) as excinfo:
        root.execute(["test", "a"])
    assert str(excinfo.value) == "unknown command a for test"


def test_require_args():
    calls = []
    root = make_root(require_args(2), calls)
    root.execute(["test", "a", "b"])
    assert calls == [["a", "b"]]
    with pytest.raises(CliError) as excinfo:
        root.execute(["test", "a"])
    assert str(excinfo.value) == "accepts 2 arg(s), received 1"
    with pytest.raises(CliError) as excinfo:
        root.execute(["test", "a", "b", "c"])
    assert str(excinfo.value) == "accepts 2 arg(s), received 3"


@pytest.mark.parametrize("args", [["a", "b"], ["a", "b", "c"], ["a", "b", "c", "d"]])
def test_range_args_accepts(args):
    calls = []
    root = make_root(range_args(2, 4), calls)
    root.execute(["test", *args])
    assert calls == [args]


@pytest.mark.parametrize(
    "args, message",
    [
        ([], "accepts between 2 and 4 arg(s), received 0"),
        (["a"], "accepts between 2 and 4 arg(s), received 1"),
        (["a", "b", "c", "d", "e"], "accepts between 2 and 4 arg(s), received 5"),
    ],
)
def test_range_args_rejects(args, message):
    calls = []
    root = make_root(range_args(2, 4), calls)
    with pytest.raises(CliError) as excinfo:
        root.execute(["test", *args])
    assert str(excinfo.value) == message
    assert calls == []