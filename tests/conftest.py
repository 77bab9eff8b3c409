import math
import struct
import zlib

import pytest

from mcaregion.region import SECTOR_SIZE


def build_region(chunks):
    '''Build the raw bytes of a region file.

    Each chunk is a dictionary with the keys "slot" and "payload" and optionally
    "tag" (default zlib), "timestamp", "length" (the declared one, when it must lie),
    "sectors" and "offset" (in sectors, when the location must lie).
    Records are laid out one after the other starting from sector 2.'''
    locations = bytearray(SECTOR_SIZE)
    timestamps = bytearray(SECTOR_SIZE)
    body = b''
    sector = 2

    for chunk in chunks:
        payload = chunk['payload']
        length = chunk.get('length', len(payload) + 1)
        record = struct.pack('>IB', length, chunk.get('tag', 2)) + payload
        count = chunk.get('sectors', max(1, math.ceil(len(record) / SECTOR_SIZE)))
        record = record.ljust(count * SECTOR_SIZE, b'\x00')

        struct.pack_into('>I', locations, 4 * chunk['slot'], (chunk.get('offset', sector) << 8) | count)
        struct.pack_into('>I', timestamps, 4 * chunk['slot'], chunk.get('timestamp', 0))

        body += record
        sector += len(record) // SECTOR_SIZE

    return bytes(locations) + bytes(timestamps) + body


@pytest.fixture
def region_builder():
    return build_region


@pytest.fixture
def hello_region():
    '''Slot 0 empty, slot 1 holding "HELLOWORLD" compressed with zlib.'''
    return build_region([
        {'slot': 1, 'payload': zlib.compress(b'HELLOWORLD'), 'timestamp': 1700000000},
    ])
