import pytest

from vinechess.options import (
    BoolOption,
    IntegerOption,
    OptionError,
    Options,
    StringOption,
)


def test_integer_option_description():
    option = IntegerOption("Hash", 16, 1, 2147483647)
    assert str(option) == "option name Hash type spin default 16 min 1 max 2147483647"


def test_bool_option_description():
    option = BoolOption("UCI_Chess960", False)
    assert str(option) == "option name UCI_Chess960 type check default False"


def test_string_option_description():
    option = StringOption("Book", "none")
    assert str(option) == "option name Book type string default none"


def test_integer_set_value_in_range():
    option = IntegerOption("Threads", 1, 1, 64)
    option.set_value("8")
    assert option.value == 8
    assert option.value_text == "8"


@pytest.mark.parametrize("text", ["0", "65", "abc", "", "99999999999"])
def test_integer_set_value_rejected(text):
    option = IntegerOption("Threads", 1, 1, 64)
    with pytest.raises(OptionError):
        option.set_value(text)
    assert option.value == 1


def test_integer_accepts_leading_space_and_sign():
    option = IntegerOption("Contempt", 0, -100, 100)
    option.set_value("  -20")
    assert option.value == -20
    option.set_value("+7")
    assert option.value == 7


def test_callback_runs_on_construction_and_set():
    seen = []
    option = IntegerOption("Hash", 16, 1, 1024, seen.append)
    assert seen == [option]
    option.set_value("32")
    assert len(seen) == 2
    assert seen[-1].value == 32


def test_callback_not_run_for_rejected_value():
    seen = []
    option = BoolOption("Ponder", False, seen.append)
    with pytest.raises(OptionError):
        option.set_value("maybe")
    assert len(seen) == 1


@pytest.mark.parametrize("text, expected", [("true", True), ("TRUE", True), ("False", False)])
def test_bool_set_value_case_insensitive(text, expected):
    option = BoolOption("Ponder", not expected)
    option.set_value(text)
    assert option.value is expected
    assert option.value_text == ("True" if expected else "False")


def test_string_set_value():
    option = StringOption("Book", "none")
    option.set_value("book.bin")
    assert option.value == "book.bin"
    assert "default book.bin" in str(option)


def test_options_lookup_is_case_insensitive():
    options = Options()
    hash_option = IntegerOption("Hash", 16, 1, 1024)
    options.add(hash_option)
    assert options.get("hash") is hash_option
    assert options.get("HASH") is hash_option
    assert "hAsH" in options


def test_options_missing_name_raises():
    options = Options()
    with pytest.raises(OptionError):
        options.get("Missing")


def test_options_first_added_wins():
    options = Options()
    first = BoolOption("Ponder", False)
    options.add(first)
    options.add(BoolOption("ponder", True))
    assert len(options) == 1
    assert options.get("Ponder") is first


def test_options_listed_in_name_order():
    options = Options()
    options.add(BoolOption("UCI_Chess960", False))
    options.add(IntegerOption("Hash", 16, 1, 2147483647))
    options.add(StringOption("book", "none"))
    assert [option.name for option in options] == ["book", "Hash", "UCI_Chess960"]
    lines = str(options).splitlines()
    assert lines == [str(option) for option in options]
    assert str(options).endswith("\n")