# tests/test_shortcut.py
from parser.shortcut import extract_shortcut_input


def test_full_url_input_param():
    url = "https://chitieu.example/?input=50k%20c%C6%A1m%20t%E1%BA%A5m"
    assert extract_shortcut_input(url) == "50k cơm tấm"


def test_bare_query_q_param():
    assert extract_shortcut_input("q=75000+x%C4%83ng") == "75000 xăng"
    assert extract_shortcut_input("?q=20k") == "20k"


def test_input_preferred_over_q():
    assert extract_shortcut_input("https://x.example/?q=a&input=b") == "b"


def test_blank_values_are_absent():
    assert extract_shortcut_input("https://x.example/?input=&q=20k") == "20k"
    assert extract_shortcut_input("https://x.example/?input=%20%20") is None


def test_no_payload():
    assert extract_shortcut_input("") is None
    assert extract_shortcut_input("https://x.example/") is None
    assert extract_shortcut_input("https://x.example/?tab=trips") is None


def test_bare_query_with_url_characters_in_value():
    assert extract_shortcut_input("q=50k ăn sáng?") == "50k ăn sáng?"
    assert extract_shortcut_input("input=20k xem https://phim.example") == "20k xem https://phim.example"
    assert extract_shortcut_input("?q=50k ăn sáng?") == "50k ăn sáng?"


def test_relative_link():
    assert extract_shortcut_input("/add?input=75000+x%C4%83ng") == "75000 xăng"
