import io

from hookrunner.cached_reader import CachedReader

SAMPLE = b"Some example string\nMultiline"


def _read_in_chunks(reader, size):
    chunks = []
    while True:
        chunk = reader.read(size)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def test_read_all_repeats_content():
    reader = CachedReader(io.BytesIO(SAMPLE))
    for _ in range(5):
        assert reader.read() == SAMPLE


def test_chunked_reads_repeat_content():
    reader = CachedReader(io.BytesIO(SAMPLE))
    for _ in range(5):
        assert _read_in_chunks(reader, 4) == SAMPLE


def test_mixed_read_modes():
    reader = CachedReader(io.BytesIO(SAMPLE))
    assert _read_in_chunks(reader, 7) == SAMPLE
    assert reader.read() == SAMPLE
    assert _read_in_chunks(reader, 100) == SAMPLE


def test_empty_source():
    reader = CachedReader(io.BytesIO(b""))
    assert reader.read() == b""
    assert reader.read(10) == b""