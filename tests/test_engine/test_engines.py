"""Tests for engine-code classification and parsing."""

from element_engine.engines import EngineKind, engine_kind, is_valid_engine, parse_engine_code


class TestEngineKind:
    def test_adaptive(self):
        assert engine_kind("111111111111") is EngineKind.ADAPTIVE
        assert engine_kind("123451234512") is EngineKind.ADAPTIVE

    def test_fixed(self):
        assert engine_kind("WVALWVALWVALW") is EngineKind.FIXED
        assert engine_kind("WWWVVVAAALLLD") is EngineKind.FIXED

    def test_malformed(self):
        assert engine_kind("1111111111") is None  # too short
        assert engine_kind("111111111116") is None  # digit out of range
        assert engine_kind("111111111110") is None
        assert engine_kind("1111111111111") is None  # 13 digits
        assert engine_kind("WVALWVALWVALX") is None  # unknown symbol
        assert engine_kind("WVALWVALWVAL") is None  # 12 symbols
        assert engine_kind("") is None

    def test_is_valid_engine(self):
        assert is_valid_engine("555555555555")
        assert not is_valid_engine("WVAL")


class TestParseEngineCode:
    def test_plain_codes(self):
        assert parse_engine_code("123451234512") == "123451234512"
        assert parse_engine_code("  WVALDWVALWVAL  ") == "WVALDWVALWVAL"

    def test_code_after_second_colon(self):
        assert parse_engine_code("7:best:WVALDWVALWVAL (score 40)") == "WVALDWVALWVAL"
        assert parse_engine_code("1:x: 111111111111") == "111111111111"

    def test_single_colon_is_not_a_field_separator(self):
        assert parse_engine_code("x:111111111111") is None

    def test_trailing_text_is_ignored(self):
        assert parse_engine_code("111111111111 comment") == "111111111111"

    def test_adaptive_prefix_wins_over_longer_digits(self):
        assert parse_engine_code("1234512345123") == "123451234512"

    def test_invalid(self):
        assert parse_engine_code("garbage") is None
        assert parse_engine_code("11111") is None
        assert parse_engine_code("1:2:WVAL") is None
