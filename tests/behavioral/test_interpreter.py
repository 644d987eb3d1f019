import pytest

from vehicle_patterns.behavioral.interpreter import DrivingContext, Sequence, parse, run
from vehicle_patterns.domain.exceptions import ValidationError


def test_program_runs_in_order():
    context = run("accelerate 50 then accelerate 100 then cruise then brake 30 then stop")

    assert context.log == [
        "accelerate 50 -> 50 km/h",
        "accelerate 100 -> 130 km/h",
        "cruise -> 130 km/h",
        "brake 30 -> 100 km/h",
        "stop -> 0 km/h",
    ]


def test_brake_does_not_go_below_zero():
    assert run("brake 40", DrivingContext(speed=10)).speed == 0


def test_custom_speed_limit():
    assert run("accelerate 200", DrivingContext(max_speed=90)).speed == 90


def test_parse_is_case_insensitive():
    tree = parse("ACCELERATE 20 Then Cruise")

    assert isinstance(tree, Sequence)
    assert len(tree.expressions) == 2


@pytest.mark.parametrize("program,message", [
    ("", "empty"),
    ("accelerate 10 then", "Dangling"),
    ("then stop", "Dangling"),
    ("fly 10", "Unknown instruction"),
    ("accelerate", "exactly one number"),
    ("cruise 10", "takes no argument"),
    ("accelerate fast", "not a whole number"),
    ("brake -5", "negative"),
])
def test_invalid_programs(program, message):
    with pytest.raises(ValidationError, match=message):
        parse(program)


@pytest.mark.parametrize("speed,max_speed", [(200, 130), (-10, 130), (0, -1)])
def test_context_rejects_out_of_range_speed(speed, max_speed):
    with pytest.raises(ValidationError):
        DrivingContext(speed=speed, max_speed=max_speed)


def test_context_accepts_speed_at_limit():
    assert run("cruise", DrivingContext(speed=130, max_speed=130)).speed == 130
