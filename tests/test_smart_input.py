# tests/test_smart_input.py
"""
Tests for the smart-input parser (amount grammar, note cleanup, categories).
"""
from ct_core.models import CategoryType, ParseResult
from parser.smart_input import DEFAULT_NOTE, parse_transaction_input


class TestAmounts:
    def test_thousands_suffix(self):
        res = parse_transaction_input("50k ăn sáng")
        assert res == ParseResult(amount=50000, category=CategoryType.FOOD, note="Ăn sáng")

    def test_million_suffix(self):
        res = parse_transaction_input("2tr tiền nhà")
        assert res.amount == 2_000_000
        assert res.note == "Tiền nhà"

    def test_no_suffix_is_dong(self):
        res = parse_transaction_input("75000 xăng")
        assert res.amount == 75000
        assert res.category == CategoryType.TRANSPORT
        assert res.note == "Xăng"

    def test_dong_suffixes(self):
        assert parse_transaction_input("30000đ gửi xe").amount == 30000
        assert parse_transaction_input("30000d gửi xe").amount == 30000
        res = parse_transaction_input("30000vnđ gửi xe")
        assert res.amount == 30000
        assert res.note == "Gửi xe"

    def test_decimal_dot(self):
        res = parse_transaction_input("12.5k cafe")
        assert res.amount == 12500
        assert res.category == CategoryType.FOOD

    def test_decimal_comma(self):
        assert parse_transaction_input("1,5tr lương").amount == 1_500_000

    def test_space_before_suffix(self):
        res = parse_transaction_input("50 k ăn trưa")
        assert res.amount == 50000
        assert res.note == "Ăn trưa"

    def test_uppercase_input(self):
        res = parse_transaction_input("50K ĂN SÁNG")
        assert res.amount == 50000
        assert res.category == CategoryType.FOOD

    def test_first_number_wins(self):
        res = parse_transaction_input("ăn 2 bát phở 60k")
        assert res.amount == 2
        assert res.note == "Ăn bát phở 60k"

    def test_amount_never_negative(self):
        res = parse_transaction_input("-50k ăn")
        assert res.amount == 50000

    def test_overflowing_amount_still_parses(self):
        res = parse_transaction_input("9" * 400 + " ăn")
        assert res is not None
        assert res.amount == float("inf")
        assert res.amount >= 0
        assert res.category == CategoryType.FOOD
        assert res.note == "Ăn"


class TestNoMatch:
    def test_text_only(self):
        assert parse_transaction_input("ăn sáng") is None

    def test_empty_and_blank(self):
        assert parse_transaction_input("") is None
        assert parse_transaction_input("   ") is None


class TestNote:
    def test_amount_position_does_not_matter(self):
        before = parse_transaction_input("50k ăn sáng")
        after = parse_transaction_input("ăn sáng 50k")
        assert before.amount == after.amount
        assert before.category == after.category
        assert after.note

    def test_amount_in_the_middle(self):
        res = parse_transaction_input("grab 45k về nhà")
        assert res.amount == 45000
        assert res.note == "Grab  về nhà"
        assert res.category == CategoryType.TRANSPORT

    def test_empty_note_placeholder(self):
        res = parse_transaction_input("20k")
        assert res.note == DEFAULT_NOTE
        assert res.category == CategoryType.OTHER

    def test_only_matched_span_removed(self):
        res = parse_transaction_input("  mua   áo 300k ")
        assert res.note == "Mua   áo"


class TestCategories:
    def test_default_other(self):
        assert parse_transaction_input("100k abcxyz").category == CategoryType.OTHER

    def test_income(self):
        assert parse_transaction_input("5tr lương").category == CategoryType.INCOME

    def test_phrase_keyword(self):
        res = parse_transaction_input("1tr khách sạn")
        assert res.category == CategoryType.LODGING

    def test_token_beats_substring(self):
        # "xe" is inside "xem" but the exact token "lương" decides
        assert parse_transaction_input("xem lương 10tr").category == CategoryType.INCOME

    def test_substring_fallback(self):
        assert parse_transaction_input("100k xem phim").category == CategoryType.TRANSPORT


def test_parse_is_idempotent():
    text = "12,5k cf sữa đá"
    assert parse_transaction_input(text) == parse_transaction_input(text)
