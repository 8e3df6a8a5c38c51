"""
Tests for the ToUnicode CMap builder.
"""

from pdfscan.core.cmap import CMapBuilder, CMapState
from pdfscan.core.line_reader import LineReader
from pdfscan.core.models import IndirectRef, ScanContext
from pdfscan.diagnostics import MessageSink


REF = IndirectRef(6, 0)


def make_context(messages=None):
    sink = MessageSink(messages.append if messages is not None else None)
    return ScanContext(reader=LineReader(b""), sink=sink)


def build(lines, messages=None):
    ctx = make_context(messages)
    CMapBuilder(ctx, REF).build(lines)
    return ctx


class TestBfChar:
    def test_single_mapping(self):
        ctx = build(["1 beginbfchar", "<0041> <0042>", "endbfchar"])
        assert ctx.cmaps[REF] == {0x0041: 0x0042}

    def test_group_with_wrong_count_is_skipped(self):
        ctx = build(["beginbfchar", "<0041> <0042> <0043>", "<0044>", "<0045> <0046>", "endbfchar"])
        assert ctx.cmaps[REF] == {0x0045: 0x0046}

    def test_conflict_keeps_first_and_is_logged(self, messages):
        ctx = build(
            ["2 beginbfchar", "<0041> <0042>", "<0041> <0043>", "endbfchar"],
            messages,
        )
        assert ctx.cmaps[REF] == {0x0041: 0x0042}
        assert any(m.startswith("Conflict : 65 : 66 vs 67") for m in messages)

    def test_odd_digit_source_is_padded(self):
        ctx = build(["beginbfchar", "<041> <3042>", "endbfchar"])
        assert ctx.cmaps[REF] == {0x0410: 0x3042}

    def test_tokens_outside_block_are_ignored(self):
        ctx = build(["<0041> <0042>", "beginbfchar", "endbfchar", "<0043> <0044>"])
        assert REF not in ctx.cmaps


class TestBfRange:
    def test_triplet_expands(self):
        ctx = build(["1 beginbfrange", "<0020> <0022> <0041>", "endbfrange"])
        assert ctx.cmaps[REF] == {0x0020: 0x0041, 0x0021: 0x0042, 0x0022: 0x0043}

    def test_destination_list(self):
        ctx = build(["beginbfrange", "<0100> <0102> [<4E00> <4E8C> <4E09>]", "endbfrange"])
        assert ctx.cmaps[REF] == {0x0100: 0x4E00, 0x0101: 0x4E8C, 0x0102: 0x4E09}

    def test_destination_list_shorter_than_range(self):
        ctx = build(["beginbfrange", "<0100> <0105> [<4E00> <4E8C>]", "endbfrange"])
        assert ctx.cmaps[REF] == {0x0100: 0x4E00, 0x0101: 0x4E8C}

    def test_short_group_is_skipped(self):
        ctx = build(["beginbfrange", "<0100>", "<0001> <0001> <0061>", "endbfrange"])
        assert ctx.cmaps[REF] == {0x0001: 0x0061}

    def test_overlapping_range_keeps_first(self, messages):
        ctx = build(
            ["beginbfrange", "<0020> <0021> <0041>", "<0021> <0022> <0061>", "endbfrange"],
            messages,
        )
        assert ctx.cmaps[REF] == {0x0020: 0x0041, 0x0021: 0x0042, 0x0022: 0x0062}
        assert sum(1 for m in messages if m.startswith("Conflict")) == 1


def test_build_returns_new_mapping_count(messages):
    ctx = make_context(messages)
    builder = CMapBuilder(ctx, REF)
    assert builder.build(["1 beginbfrange", "<0020> <0022> <0041>", "endbfrange"]) == 3
    # 충돌은 세지 않는다
    assert builder.build(["1 beginbfchar", "<0020> <0061>", "<0030> <0062>", "endbfchar"]) == 4


def test_state_transitions():
    ctx = make_context()
    builder = CMapBuilder(ctx, REF)
    assert builder.state == CMapState.IDLE
    builder.feed("2 beginbfchar")
    assert builder.state == CMapState.IN_BFCHAR
    builder.feed("endbfchar")
    assert builder.state == CMapState.IDLE
    builder.feed("1 beginbfrange")
    assert builder.state == CMapState.IN_BFRANGE
    builder.feed("endbfrange")
    assert builder.state == CMapState.IDLE


def test_mixed_blocks_share_one_table():
    ctx = build([
        "1 beginbfchar", "<0003> <0020>", "endbfchar",
        "1 beginbfrange", "<0010> <0011> <3042>", "endbfrange",
    ])
    assert ctx.cmaps[REF] == {0x0003: 0x0020, 0x0010: 0x3042, 0x0011: 0x3043}
