import io

import pytest

from threadcraft import utils


class Token:
    def __init__(self, label):
        self.label = label

    def __eq__(self, other):
        return isinstance(other, Token) and other.label == self.label

    __hash__ = object.__hash__


def test_require_non_null_returns_object():
    obj = Token("a")
    assert utils.require_non_null(obj) is obj


def test_require_non_null_rejects_none():
    with pytest.raises(ValueError, match="object can't be null."):
        utils.require_non_null(None)


def test_remove_object_uses_identity():
    a, b, twin = Token("a"), Token("b"), Token("a")
    result = utils.remove_object([a, b, a, twin], a)
    assert len(result) == 2
    assert result[0] is b
    assert result[1] is twin


def test_remove_object_leaves_input_untouched():
    a, b = Token("a"), Token("b")
    items = [a, b]
    utils.remove_object(items, a)
    assert items[0] is a and items[1] is b


def test_delete_val_matches_remove_object():
    a, b, c = Token("a"), Token("b"), Token("c")
    items = [a, b, c, b]
    assert utils.delete_val(b, items) == utils.remove_object(items, b)
    assert all(item is not b for item in utils.delete_val(b, items))


def test_set_to_list_keeps_members():
    members = {Token("x"), Token("y"), Token("z")}
    result = utils.set_to_list(members)
    assert len(result) == len(members)
    assert set(result) == members


def test_should_be_positive():
    utils.should_be_positive(1)
    for bad in (0, -3):
        with pytest.raises(ValueError, match="val must be positive."):
            utils.should_be_positive(bad)


def test_length_should_be_message():
    with pytest.raises(ValueError) as info:
        utils.length_should_be("ab", 3, 5)
    assert str(info.value) == "ab size should be 3 ~ 5."


def test_length_should_be_bounds_inclusive():
    utils.length_should_be("abc", 3, 5)
    utils.length_should_be("abcde", 3, 5)
    with pytest.raises(ValueError):
        utils.length_should_be("abcdef", 3, 5)


def test_handle_input_retries_until_in_range():
    out = io.StringIO()
    value = utils.handle_input(1, 5, io.StringIO("0\n7\n3\n"), out)
    assert value == 3
    assert out.getvalue().count("請選擇數值介於1~5之間!!!") == 3


def test_handle_input_eof():
    with pytest.raises(EOFError):
        utils.handle_input(1, 5, io.StringIO("9\n"), io.StringIO())


def test_handle_input_non_integer():
    with pytest.raises(ValueError):
        utils.handle_input(1, 5, io.StringIO("abc\n"), io.StringIO())


def test_input_multiple_nums_skips_empty_lines_and_dedupes():
    result = utils.input_multiple_nums(io.StringIO("\n\n3 1 3 2\n9\n"))
    assert result == [1, 2, 3]


def test_input_multiple_nums_stops_at_non_number():
    result = utils.input_multiple_nums(io.StringIO("4 5 x 6\n"))
    assert 6 not in result
    assert result == sorted(set(result))
    assert set(result) == {4, 5}


def test_input_multiple_nums_eof():
    with pytest.raises(EOFError):
        utils.input_multiple_nums(io.StringIO("\n\n"))


def test_val_should_bigger():
    utils.val_should_bigger(5, 5)
    with pytest.raises(ValueError, match="should bigger than 5."):
        utils.val_should_bigger(4, 5)


def test_val_should_be():
    utils.val_should_be(2, 1, 3)
    with pytest.raises(ValueError, match="val should be 1 ~ 3."):
        utils.val_should_be(4, 1, 3)
    with pytest.raises(ValueError):
        utils.val_should_be(0, 1, 3)


def test_size_checks():
    items = [1, 2, 3]
    utils.size_should_be(items, 3)
    utils.size_should_bigger(items, 3)
    utils.size_should_smaller(items, 3)
    with pytest.raises(ValueError, match="arr size should be val"):
        utils.size_should_be(items, 2)
    with pytest.raises(ValueError, match="arr size should bigger than val"):
        utils.size_should_bigger(items, 4)
    with pytest.raises(ValueError, match="arr size should Smaller than val"):
        utils.size_should_smaller(items, 2)


def test_array_should_not_be_empty():
    utils.array_should_not_be_empty([0])
    with pytest.raises(ValueError, match="arr can't be empty"):
        utils.array_should_not_be_empty([])


def test_to_string_scalar_round_trip():
    assert int(utils.to_string(42)) == 42
    assert utils.to_string("hello") == "hello"


def test_to_string_list():
    assert utils.to_string([1, 2, 3]) == "[1 , 2 , 3]"


def test_to_string_empty_list():
    assert utils.to_string([]) == "[]"


def test_to_string_list_elements_recoverable():
    text = utils.to_string([7, 8, 9])
    assert text.startswith("[") and text.endswith("]")
    assert [int(part) for part in text[1:-1].split(" , ")] == [7, 8, 9]