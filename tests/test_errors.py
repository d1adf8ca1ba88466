import pytest

from bowlscore.errors import GameError


def test_message_is_kept():
    error = GameError("Caught Game Rule Exception : More then 10 Frames are Not Allowed...!")
    assert error.message == "Caught Game Rule Exception : More then 10 Frames are Not Allowed...!"
    assert str(error) == error.message


def test_can_be_raised_and_caught_as_exception():
    error = GameError("rule broken")
    assert error.message == "rule broken"
    with pytest.raises(Exception) as info:
        raise error
    assert info.value is error
    assert info.value.message == "rule broken"
    assert str(info.value) == "rule broken"


def test_args_hold_message():
    error = GameError("abc")
    assert error.args == ("abc",)