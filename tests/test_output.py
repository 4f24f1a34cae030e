import io

import pytest

from solong.output import put_char, put_endl, put_nbr, put_str


@pytest.mark.parametrize("char", ["A", "B", "#", "\n"])
def test_put_char_writes_one_character(char):
    buffer = io.StringIO()
    put_char(char, buffer)
    assert buffer.getvalue() == char


def test_put_char_accepts_code():
    buffer = io.StringIO()
    put_char(ord("A"), buffer)
    assert buffer.getvalue() == "A"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("AB", io.StringIO())


@pytest.mark.parametrize(
    "text", ["Hello, world!", "Ceci est un test de ft_putstr_fd.", ""]
)
def test_put_str_writes_text_unchanged(text):
    buffer = io.StringIO()
    put_str(text, buffer)
    assert buffer.getvalue() == text


@pytest.mark.parametrize("text", ["Hello, world!", "Ceci est un autre test.", ""])
def test_put_endl_appends_newline(text):
    buffer = io.StringIO()
    put_endl(text, buffer)
    assert buffer.getvalue() == text + "\n"


@pytest.mark.parametrize("number", [12345, -98765, 0, 1234567890])
def test_put_nbr_round_trips(number):
    buffer = io.StringIO()
    put_nbr(number, buffer)
    assert int(buffer.getvalue()) == number


def test_put_nbr_negative_has_sign():
    buffer = io.StringIO()
    put_nbr(-98765, buffer)
    assert buffer.getvalue() == "-98765"


def test_put_nbr_int_min():
    buffer = io.StringIO()
    put_nbr(-2147483648, buffer)
    assert buffer.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("Hello, world!")
    put_char("!")
    assert capsys.readouterr().out == "Hello, world!!"


def test_writes_accumulate_in_order():
    buffer = io.StringIO()
    put_str("Moves: ", buffer)
    put_nbr(7, buffer)
    put_endl("", buffer)
    assert buffer.getvalue() == "Moves: 7\n"