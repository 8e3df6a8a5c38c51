"""
Tests for the line recognizers.
"""

from pdfscan.core import patterns
from pdfscan.core.models import IndirectRef


class TestStructure:
    def test_header(self):
        assert patterns.match_header("%PDF-1.4")
        assert patterns.match_header("%PDF-1.7 trailing junk")
        assert not patterns.match_header("%PDF-x.4")
        assert not patterns.match_header(" %PDF-1.4")
        assert not patterns.match_header("Hello")

    def test_object_header(self):
        assert patterns.match_object_header("12 0 obj") == IndirectRef(12, 0)
        assert patterns.match_object_header("7 3 obj   ") == IndirectRef(7, 3)
        assert patterns.match_object_header("12 0 R") is None
        assert patterns.match_object_header("endobj") is None

    def test_stream_length(self):
        assert patterns.find_stream_length("<< /Length 120 /Filter /FlateDecode >>") == 120
        assert patterns.find_stream_length("<< /Length1 5 /Length 10 >>") == 10
        assert patterns.find_stream_length("<< /Type /Page >>") is None

    def test_dictionary_keys(self):
        keys = patterns.dictionary_keys("<< /Length 10 /Filter /FlateDecode >>")
        assert keys == ["length", "filter", "flatedecode"]

    def test_excluded_marker(self):
        markers = ("XObject", "Device")
        assert patterns.has_excluded_marker("<< /Subtype /XObject >>", markers) == "XObject"
        assert patterns.has_excluded_marker("<< /ColorSpace /DeviceRGB >>", markers) == "Device"
        assert patterns.has_excluded_marker("<< /Length 3 >>", markers) is None


class TestFontDictionary:
    def test_font_resources(self):
        line = "<< /Font << /F1 5 0 R /F12 9 0 R >> >>"
        assert list(patterns.iter_font_resources(line)) == [
            ("F1", IndirectRef(5, 0)),
            ("F12", IndirectRef(9, 0)),
        ]

    def test_font_descriptor_is_not_a_resource(self):
        assert list(patterns.iter_font_resources("<< /FontDescriptor 7 0 R >>")) == []

    def test_to_unicode(self):
        assert patterns.find_to_unicode("<< /ToUnicode 6 0 R >>") == IndirectRef(6, 0)
        assert patterns.find_to_unicode("<< /Type /Font >>") is None

    def test_shift_jis(self):
        assert patterns.is_shift_jis("<< /Encoding /90ms-RKSJ-H >>")
        assert not patterns.is_shift_jis("<< /Encoding /Identity-H >>")


class TestContentLines:
    def test_font_selector(self):
        assert patterns.find_font_selector("/F3 10.5 Tf") == "F3"
        assert patterns.find_font_selector("/Font") is None

    def test_text_show(self):
        assert patterns.is_text_show("(abc) Tj")
        assert patterns.is_text_show("[(a) 10 (b)] TJ")
        assert not patterns.is_text_show("(abc) Tj ET")

    def test_show_hex_drops_odd_digit(self):
        assert patterns.show_hex_bytes("<0041><004> Tj") == b"\x00\x41\x00"

    def test_literal_runs_merge_array_adjustments(self):
        assert list(patterns.iter_literal_runs("[(Hel)-20(lo)] TJ")) == ["Hello"]

    def test_empty_literal(self):
        assert list(patterns.iter_literal_runs("() Tj")) == [""]


class TestCMapTokens:
    def test_odd_token_is_right_padded(self):
        tokens = patterns.cmap_hex_tokens("<041>")
        assert tokens == [b"\x04\x10"]
        assert patterns.tokens_to_codes(tokens) == [0x0410]

    def test_single_byte_token_is_zero_extended(self):
        assert patterns.tokens_to_codes(patterns.cmap_hex_tokens("<41>")) == [0x41]
        assert patterns.tokens_to_codes(patterns.cmap_hex_tokens("<4>")) == [0x40]

    def test_long_token_yields_several_codes(self):
        codes = patterns.tokens_to_codes(patterns.cmap_hex_tokens("<00410042> <004100>"))
        assert codes == [0x0041, 0x0042, 0x0041]
