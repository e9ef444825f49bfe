import pytest

from exerciser.lessons.errors import (
    CreationError,
    NegativeError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroError,
    buy_items,
    generate_nametag_text,
    parse_pos_nonzero,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as excinfo:
        generate_nametag_text("")
    assert str(excinfo.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as excinfo:
        total_cost("beep boop")
    assert str(excinfo.value) == "invalid digit found in string"


@pytest.mark.parametrize("text", [" 34", "3_4", "-", "+"])
def test_item_quantity_is_parsed_strictly(text):
    with pytest.raises(ValueError) as excinfo:
        total_cost(text)
    assert str(excinfo.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as excinfo:
        total_cost("")
    assert str(excinfo.value) == "cannot parse integer from empty string"


def test_buy_items_spends_tokens(capsys):
    assert buy_items(100, "8") == 100 - total_cost("8")
    assert "You now have" in capsys.readouterr().out


def test_buy_items_refuses_when_too_expensive(capsys):
    assert buy_items(10, "8") == 10
    assert "You can't afford that many!" in capsys.readouterr().out


def test_buy_items_invalid_input():
    with pytest.raises(ValueError, match="invalid operation"):
        buy_items(100, "eight")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    assert str(NegativeError()) == "number is negative"
    assert str(ZeroError()) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as excinfo:
        parse_pos_nonzero("not a number")
    assert not isinstance(excinfo.value.error, CreationError)
    assert str(excinfo.value.error) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as excinfo:
        parse_pos_nonzero("-555")
    assert isinstance(excinfo.value.error, NegativeError)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as excinfo:
        parse_pos_nonzero("0")
    assert isinstance(excinfo.value.error, ZeroError)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)