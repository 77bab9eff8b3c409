import gzip
import io
import logging
import zlib

import pytest

from mcaregion import RegionFile
from mcaregion.exceptions import (
    DeclaredLengthOverflow,
    InflateError,
    OutOfBounds,
    TruncatedHeader,
    UnsupportedCompression,
)
from mcaregion.region import parse_region_name, SECTOR_SIZE


def test_hello_world(hello_region):
    region = RegionFile(hello_region)
    sink = io.BytesIO()

    report = region.extract(sink)

    assert sink.getvalue() == b'HELLOWORLD'
    assert [_.slot for _ in report.written] == [1]
    assert report.failures == []
    assert report.size == 10


def test_corrupt_chunk_is_skipped(region_builder, caplog):
    data = region_builder([
        {'slot': 0, 'payload': zlib.compress(b'first')},
        {'slot': 1, 'payload': zlib.compress(b'corrupt'), 'length': 3 * SECTOR_SIZE},
        {'slot': 2, 'payload': zlib.compress(b'second')},
    ])
    sink = io.BytesIO()

    report = RegionFile(data).extract(sink)

    assert sink.getvalue() == b'firstsecond'
    assert [_.slot for _ in report.written] == [0, 2]
    assert len(report.failures) == 1

    location, exc = report.failures[0]
    assert location.slot == 1
    assert isinstance(exc, DeclaredLengthOverflow)
    assert exc.location is location

    warnings = [_ for _ in caplog.records if _.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_out_of_bounds_is_skipped(region_builder):
    data = region_builder([
        {'slot': 0, 'payload': zlib.compress(b'first')},
        {'slot': 1, 'payload': zlib.compress(b'nowhere'), 'offset': 1000},
        {'slot': 2, 'payload': zlib.compress(b'second')},
    ])
    sink = io.BytesIO()

    report = RegionFile(data).extract(sink)

    assert sink.getvalue() == b'firstsecond'
    assert isinstance(report.failures[0][1], OutOfBounds)


def test_unsupported_compression_is_reported(region_builder, caplog):
    data = region_builder([
        {'slot': 0, 'payload': b'lz4 stuff', 'tag': 4},
        {'slot': 5, 'payload': zlib.compress(b'ok')},
    ])
    sink = io.BytesIO()

    with caplog.at_level(logging.WARNING):
        report = RegionFile(data).extract(sink)

    assert sink.getvalue() == b'ok'
    assert isinstance(report.failures[0][1], UnsupportedCompression)
    assert 'unsupported compression type at chunk starting at 8192' in caplog.text


def test_bad_stream_is_skipped(region_builder):
    data = region_builder([
        {'slot': 0, 'payload': zlib.compress(b'HELLOWORLD')[:-6]},
        {'slot': 1, 'payload': zlib.compress(b'ok')},
    ])
    sink = io.BytesIO()

    report = RegionFile(data).extract(sink)

    assert sink.getvalue() == b'ok'
    assert isinstance(report.failures[0][1], InflateError)


def test_every_supported_compression(region_builder):
    data = region_builder([
        {'slot': 0, 'payload': gzip.compress(b'gzip,'), 'tag': 1},
        {'slot': 1, 'payload': zlib.compress(b'zlib,'), 'tag': 2},
        {'slot': 2, 'payload': b'none', 'tag': 3},
    ])
    sink = io.BytesIO()

    report = RegionFile(data).extract(sink)

    assert sink.getvalue() == b'gzip,zlib,none'
    assert report.failures == []


def test_custom_report(region_builder):
    data = region_builder([{'slot': 0, 'payload': b'', 'tag': 0x82}])
    reported = []

    report = RegionFile(data).extract(io.BytesIO(), report=lambda location, exc: reported.append(exc))

    assert reported == [report.failures[0][1]]
    assert reported[0].tag == 0x82


def test_truncated_header_is_fatal():
    region = RegionFile(b'\x00' * 100)

    with pytest.raises(TruncatedHeader):
        region.extract(io.BytesIO())


def test_sink_errors_are_fatal(hello_region):
    class BrokenSink:
        def write(self, data):
            raise OSError('disk full')

    with pytest.raises(OSError):
        RegionFile(hello_region).extract(BrokenSink())


def test_iter_chunks(region_builder):
    data = region_builder([
        {'slot': 0, 'payload': b'abc', 'tag': 3},
        {'slot': 1, 'payload': b'abc', 'length': 2 * SECTOR_SIZE},
    ])

    chunks = list(RegionFile(data).iter_chunks())

    assert chunks[0][1].payload.value == b'abc'
    assert isinstance(chunks[1][1], DeclaredLengthOverflow)


def test_region_from_path(tmp_path, hello_region):
    path = tmp_path / 'r.-1.2.mca'
    path.write_bytes(hello_region)

    region = RegionFile(str(path))

    assert region.coords == (-1, 2)
    assert [_.world_coords(*region.coords) for _ in region.locations] == [(-31, 64)]


def test_region_from_bytes_has_no_coords(hello_region):
    assert RegionFile(hello_region).coords is None


def test_missing_region(tmp_path):
    with pytest.raises(FileNotFoundError):
        RegionFile(str(tmp_path / 'r.0.0.mca'))


@pytest.mark.parametrize('name, coords', [
    ('r.0.0.mca', (0, 0)),
    ('/some/world/region/r.-3.12.mca', (-3, 12)),
    ('r.1.-1.mcr', (1, -1)),
    ('c.0.0.mcc', None),
    ('r.a.0.mca', None),
])
def test_parse_region_name(name, coords):
    assert parse_region_name(name) == coords
