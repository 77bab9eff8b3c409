'''
# Minecraft region file (Anvil .mca, McRegion .mcr)

  .----------------------------------.
  | header (locations + timestamps)  |  2 sectors
  | chunk record                     |  n sectors
  | chunk record                     |  m sectors
  | ...                              |
  '----------------------------------'

RegionFile ties together the header, the chunk records and the decompression:
chunks that can't be decoded are reported and skipped, only a missing or
truncated header stops the extraction.
'''
import logging
import os
import re
from typing import Callable, List, Optional, Tuple

from ..compression import decompress
from ..exceptions import ChunkException, UnsupportedCompression
from ..streams import Stream
from .chunk import ChunkRecord, extract, CHUNK_HEADER_SIZE
from .header import (
    ChunkLocation,
    RegionHeader,
    parse_header,
    HEADER_SIZE,
    REGION_WIDTH,
    SECTOR_SIZE,
    SLOT_COUNT,
)


logger = logging.getLogger(__name__)

REGION_NAME_RE = re.compile(r'^r\.(-?\d+)\.(-?\d+)\.mc[ar]$')


def parse_region_name(path) -> Optional[Tuple[int, int]]:
    '''Region coordinates from a file named like r.<x>.<z>.mca, None otherwise.'''
    match = REGION_NAME_RE.match(os.path.basename(str(path)))
    if not match:
        return None

    return int(match.group(1)), int(match.group(2))


def report_failure(location: ChunkLocation, exc: ChunkException) -> None:
    if isinstance(exc, UnsupportedCompression):
        logger.warning('unsupported compression type at chunk starting at %d' % location.byte_offset)
    else:
        logger.warning('skipping chunk %d at offset %d: %s' % (location.slot, location.byte_offset, exc))


class ExtractionReport(object):
    '''What happened while extracting: the locations written to the sink
    and the (location, exception) couples of the skipped ones.'''

    def __init__(self):
        self.written: List[ChunkLocation] = []
        self.failures: List[Tuple[ChunkLocation, ChunkException]] = []
        self.size = 0

    def __repr__(self):
        return '<%s(written=%d, failures=%d, size=%d)>' % (
            self.__class__.__name__, len(self.written), len(self.failures), self.size)


class RegionFile(object):
    '''The whole region is loaded in memory: source can be a path or the raw bytes.'''

    def __init__(self, source):
        self.path = source if isinstance(source, (str, os.PathLike)) else None
        self.stream = Stream(source)
        self.data = self.stream.getvalue()
        self._locations = None

    def __repr__(self):
        return '<%s(%s, size=%d)>' % (self.__class__.__name__, self.path or 'bytes', len(self.data))

    @property
    def coords(self) -> Optional[Tuple[int, int]]:
        return parse_region_name(self.path) if self.path is not None else None

    @property
    def locations(self) -> List[ChunkLocation]:
        if self._locations is None:
            self._locations = parse_header(self.data)

        return self._locations

    def iter_chunks(self):
        '''Yield (location, record) in slot order; the record is replaced by
        the exception when the chunk can't be extracted.'''
        for location in self.locations:
            try:
                yield location, extract(self.data, location)
            except ChunkException as e:
                yield location, e

    def extract(self, sink, report: Callable[[ChunkLocation, ChunkException], None] = report_failure) -> ExtractionReport:
        '''Decompress every chunk and append it to sink (anything with a write() method).

        The output is the plain concatenation of the payloads, in slot order.'''
        result = ExtractionReport()

        for location in self.locations:
            try:
                record = extract(self.data, location)
                data = decompress(record.tag, record.payload.value)
            except ChunkException as e:
                if e.location is None:
                    e.location = location
                report(location, e)
                result.failures.append((location, e))
                continue

            logger.debug('chunk %d (%d, %d): %d bytes' % (location.slot, location.x, location.z, len(data)))
            sink.write(data)
            result.written.append(location)
            result.size += len(data)

        return result
