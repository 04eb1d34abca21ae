import pytest
from trdp_config.utils.helpers import to_list, to_number, stored_file_name, generate_config_id


def test_to_list_absent_is_empty():
    assert to_list(None) == []


def test_to_list_wraps_single_node():
    node = {"id": "1"}
    assert to_list(node) == [node]
    # An empty tag is still a declared node
    assert to_list("") == [""]


def test_to_list_keeps_sequence():
    nodes = [{"id": "1"}, {"id": "2"}]
    assert to_list(nodes) is nodes
    pair = ({"id": "1"}, {"id": "2"})
    assert to_list(pair) is pair


@pytest.mark.parametrize("value, expected", [
    ("42", 42),
    (" 7 ", 7),
    ("0", 0),
    ("-3", -3),
    ("3.5", 3.5),
    (3.5, 3.5),
    (12, 12),
    ("0x10", 16),
    ("0o17", 15),
    ("0b101", 5),
])
def test_to_number_parses_numbers(value, expected):
    assert to_number(value) == expected


def test_to_number_keeps_integers_integral():
    assert isinstance(to_number("42"), int)
    assert isinstance(to_number("4.0"), float)


@pytest.mark.parametrize("value", [
    None, "abc", "", "   ", "nan", "inf", "-Infinity", "1_000", "0xZZ",
    True, float("nan"), float("inf"), {"unit": "ms"}, ["1"],
])
def test_to_number_absent_for_non_numbers(value):
    assert to_number(value) is None


def test_stored_file_name_keeps_extension():
    assert stored_file_name("abc", "device.XML") == "abc.XML"
    assert stored_file_name("abc", "device") == "abc.xml"


def test_generate_config_id_is_unique():
    assert generate_config_id() != generate_config_id()
