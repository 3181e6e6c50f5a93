import pytest

from hartnoise.stream import BLOCK_SIZE, DeterministicStream, seed_chunks


def test_stream_deterministic_for_seed():
    s1 = DeterministicStream.with_seed(b"hello world")
    s2 = DeterministicStream.with_seed(b"hello world")
    assert s1.fill(100) == s2.fill(100)


def test_stream_changes_with_seed():
    s1 = DeterministicStream.with_seed(b"seed-a")
    s2 = DeterministicStream.with_seed(b"seed-b")
    assert s1.fill(64) != s2.fill(64)


def test_trailing_zero_bytes_change_output():
    s1 = DeterministicStream.with_seed(b"abc")
    s2 = DeterministicStream.with_seed(b"abc\x00")
    assert s1.fill(48) != s2.fill(48)


def test_str_seed_matches_utf8_bytes():
    assert DeterministicStream("héllo").fill(40) == DeterministicStream("héllo".encode("utf-8")).fill(40)


def test_fill_in_pieces_matches_single_fill():
    whole = DeterministicStream.with_seed(b"pieces").fill(77)
    s = DeterministicStream.with_seed(b"pieces")
    parts = [s.fill(n) for n in (5, 20, 7, 0, 16, 1, 28)]
    assert b"".join(parts) == whole


def test_fill_lengths():
    s = DeterministicStream.with_seed(b"len")
    for n in (0, 1, 15, 16, 17, 31, 32, 33, 100):
        assert len(s.fill(n)) == n


def test_fill_zero_does_not_advance():
    s1 = DeterministicStream.with_seed(b"zero")
    s2 = DeterministicStream.with_seed(b"zero")
    assert s1.fill(0) == b""
    assert s1.fill(24) == s2.fill(24)


def test_fill_negative_raises():
    with pytest.raises(ValueError):
        DeterministicStream().fill(-1)


def test_bad_iv_length_raises():
    with pytest.raises(ValueError):
        DeterministicStream(b"x", iv=b"short")


def test_seed_chunks_zero_pad_last_chunk():
    chunks = seed_chunks(b"a" * 20)
    assert len(chunks) == 2
    assert all(len(c) == BLOCK_SIZE for c in chunks)
    assert chunks[1] == b"a" * 4 + b"\x00" * 12
    assert seed_chunks(b"") == []


def test_fork_same_extra_seed_is_identical():
    root = DeterministicStream.with_seed(b"root")
    a = root.fork(b"child")
    b = root.fork(b"child")
    assert a.fill(64) == b.fill(64)


def test_fork_different_extra_seed_differs():
    root = DeterministicStream.with_seed(b"root")
    assert root.fork(b"a").fill(32) != root.fork(b"b").fill(32)


def test_fork_does_not_mutate_parent():
    parent = DeterministicStream.with_seed(b"parent")
    before = parent.state_block
    for i in range(10):
        parent.fork(bytes([i]))
    assert parent.state_block == before
    assert parent.fill(48) == DeterministicStream.with_seed(b"parent").fill(48)


def test_fork_depends_on_parent_position():
    parent = DeterministicStream.with_seed(b"parent")
    early = parent.fork(b"x").fill(32)
    parent.fill(BLOCK_SIZE + 1)
    late = parent.fork(b"x").fill(32)
    assert early != late


def test_fork_output_differs_from_parent():
    parent = DeterministicStream.with_seed(b"parent")
    child = parent.fork(b"")
    assert child.fill(32) != DeterministicStream.with_seed(b"parent").fill(32)


def test_random_in_unit_interval():
    s = DeterministicStream.with_seed(b"floats")
    vals = [s.random() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in vals)
    assert len(set(vals)) == len(vals)


def test_next_u32_and_u64_are_big_endian_reads():
    s1 = DeterministicStream.with_seed(b"ints")
    s2 = DeterministicStream.with_seed(b"ints")
    assert s1.next_u32() == int.from_bytes(s2.fill(4), "big")
    assert s1.next_u64() == int.from_bytes(s2.fill(8), "big")
