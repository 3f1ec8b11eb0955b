import pytest

from factorials.errors import InvalidArgument
from factorials.models import FactorialRequest, Strategy, parse_strategy, validate_request


def test_valid_request():
    request = validate_request(5, chunk_size=2)
    assert request == FactorialRequest(n=5, chunk_size=2)
    assert request.max_workers is None


def test_request_is_frozen():
    request = validate_request(3)
    with pytest.raises(Exception):
        request.n = 4


@pytest.mark.parametrize(
    "kwargs,field",
    [
        ({"n": -1}, "n"),
        ({"n": 2.5}, "n"),
        ({"n": False}, "n"),
        ({"n": 4, "chunk_size": 0}, "chunk_size"),
        ({"n": 4, "max_workers": -2}, "max_workers"),
    ],
)
def test_invalid_requests_name_the_field(kwargs, field):
    with pytest.raises(InvalidArgument) as excinfo:
        validate_request(**kwargs)
    assert excinfo.value.field == field
    assert str(excinfo.value).startswith(f"{field}: ")


def test_parse_strategy():
    assert parse_strategy("agent") is Strategy.agent
    assert parse_strategy(Strategy.lazy) is Strategy.lazy
    with pytest.raises(InvalidArgument):
        parse_strategy("nope")
