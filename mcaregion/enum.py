from enum import Enum


class CompressionType(Enum):
    '''Values of the byte following the chunk length.

    The high bit (EXTERNAL_FLAG) marks chunks too big for the region file:
    the payload is stored in a separate c.<x>.<z>.mcc file next to it.'''
    GZIP   = 1
    ZLIB   = 2
    NONE   = 3
    LZ4    = 4
    CUSTOM = 127


EXTERNAL_FLAG = 0x80
