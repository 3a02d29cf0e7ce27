from flappy.__main__ import _parse_args, main


def test_parse_args_defaults():
    args = _parse_args([])
    assert args.seed is None
    assert args.countdown == 0
    assert args.log_level == "info"


def test_parse_args_overrides():
    args = _parse_args(["--seed", "3", "--countdown", "2.5", "--log-level", "debug"])
    assert args.seed == 3
    assert args.countdown == 2.5
    assert args.log_level == "debug"


def test_invalid_countdown_exits_before_opening_a_window():
    assert main(["--countdown", "-1"]) == 2
