'''
# Chunk record

Each chunk starts at a sector boundary with a five bytes sub-header

  .-----------------------------------------------.
  | length      (uint32, big endian)              |
  | compression (uint8)                           |
  | payload     (length - 1 bytes)                |
  | padding up to the end of the last sector      |
  '-----------------------------------------------'

where length counts the compression byte too.
'''
import logging

from ..core import Chunk
from .. import fields
from ..enum import CompressionType, EXTERNAL_FLAG
from ..exceptions import ChunkUnpackException, DeclaredLengthOverflow, OutOfBounds
from ..properties import DeltaDependency


logger = logging.getLogger(__name__)

CHUNK_HEADER_SIZE = 5


class ChunkRecord(Chunk):
    length      = fields.StructField('I')
    compression = fields.StructField('B', enum=CompressionType)
    payload     = fields.StringField(DeltaDependency(-1, '.length'))

    @property
    def tag(self) -> int:
        '''The compression byte as a plain integer.'''
        compression = self.compression.value
        return compression.value if isinstance(compression, CompressionType) else compression

    @property
    def is_external(self) -> bool:
        return bool(self.tag & EXTERNAL_FLAG)


def extract(data, location) -> ChunkRecord:
    '''Unpack the record reserved for location inside the region data.

    Only the sectors reserved by the location are visible while unpacking,
    so a declared length running past them fails instead of reading
    into the following chunk.'''
    if location.byte_offset + location.byte_length > len(data) or location.byte_length < CHUNK_HEADER_SIZE:
        raise OutOfBounds(
            f'chunk at {location.byte_offset} (+{location.byte_length}) is outside the file of {len(data)} bytes',
            location=location,
        )

    sectors = data[location.byte_offset:location.end]

    try:
        record = ChunkRecord(bytes(sectors))
    except ChunkUnpackException as e:
        length = int.from_bytes(sectors[:4], 'big')
        logger.debug('chunk at %d declares %d bytes in %d reserved' % (location.byte_offset, length, location.byte_length))
        raise DeclaredLengthOverflow(length, location=location, chain=e.chain) from e

    record.location = location

    return record
