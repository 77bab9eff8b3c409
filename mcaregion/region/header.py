'''
# Region header

A region file starts with two tables of 1024 big-endian entries, one entry
for each chunk of the 32x32 area covered by the region:

  .--------------------------------------------.
  | locations:  1024 x (offset:24, sectors:8)  |  bytes 0x0000 - 0x0fff
  | timestamps: 1024 x uint32                  |  bytes 0x1000 - 0x1fff
  '--------------------------------------------'

Offsets and sizes are in sectors of 4096 bytes; the entry at index i refers
to the chunk at local coordinates (i % 32, i // 32). An entry with both
offset and size equal to zero marks a chunk not (yet) generated.
'''
import logging
from datetime import datetime, timezone
from typing import List, NamedTuple, Tuple

from ..core import Chunk
from .. import fields
from ..exceptions import TruncatedHeader


logger = logging.getLogger(__name__)

SECTOR_SIZE = 4096
SLOT_COUNT = 1024
HEADER_SIZE = 2 * SECTOR_SIZE
REGION_WIDTH = 32


class ChunkLocation(NamedTuple):
    slot: int
    byte_offset: int
    byte_length: int
    timestamp: int

    @property
    def x(self) -> int:
        return self.slot % REGION_WIDTH

    @property
    def z(self) -> int:
        return self.slot // REGION_WIDTH

    @property
    def sector_offset(self) -> int:
        return self.byte_offset // SECTOR_SIZE

    @property
    def sector_count(self) -> int:
        return self.byte_length // SECTOR_SIZE

    @property
    def end(self) -> int:
        return self.byte_offset + self.byte_length

    @property
    def modified(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def world_coords(self, region_x: int, region_z: int) -> Tuple[int, int]:
        '''Absolute chunk coordinates given the ones of the region.'''
        return region_x * REGION_WIDTH + self.x, region_z * REGION_WIDTH + self.z


class RegionHeader(Chunk):
    locations  = fields.ArrayField(fields.BitField('uint:24, uint:8'), n=SLOT_COUNT)
    timestamps = fields.ArrayField(fields.StructField('I'), n=SLOT_COUNT)

    def iter_slots(self):
        '''Yield (slot, offset in sectors, size in sectors, timestamp) for every
        entry, present or not.'''
        for slot, (location, timestamp) in enumerate(zip(self.locations, self.timestamps)):
            offset, count = location.value
            yield slot, offset, count, timestamp.value


def parse_header(data) -> List[ChunkLocation]:
    '''Decode the header at the start of data into the locations of the chunks
    present, in slot order. Nothing is checked against the size of the file.'''
    if len(data) < HEADER_SIZE:
        raise TruncatedHeader(len(data))

    header = RegionHeader(bytes(data[:HEADER_SIZE]))

    locations = []
    for slot, offset, count, timestamp in header.iter_slots():
        if offset == 0 and count == 0:
            continue

        locations.append(ChunkLocation(slot, offset * SECTOR_SIZE, count * SECTOR_SIZE, timestamp))

    logger.debug('found %d chunks out of %d slots' % (len(locations), SLOT_COUNT))

    return locations
