'''
Decompression of chunk payloads, dispatched on the compression byte of the record.

Only GZIP, ZLIB and NONE are handled; LZ4, CUSTOM and chunks stored in
external .mcc files are reported as UnsupportedCompression.
'''
import logging
import zlib

from .enum import CompressionType
from .exceptions import InflateError, UnsupportedCompression


logger = logging.getLogger(__name__)

# size of the blocks produced at each inflate round: it's only a hint,
# the output grows until the stream ends
INFLATE_BUFFER_HINT = 1024 * 1024

GZIP_WBITS = 16 + zlib.MAX_WBITS


def inflate(payload, wbits=zlib.MAX_WBITS, hint=INFLATE_BUFFER_HINT) -> bytes:
    '''Run a zlib (or gzip, depending on wbits) decompression to completion.'''
    try:
        decompressor = zlib.decompressobj(wbits)
    except (ValueError, zlib.error) as e:
        logger.debug(f'inflate init failed: {e}')
        raise InflateError('init') from e

    blocks = []
    data = payload
    try:
        while True:
            blocks.append(decompressor.decompress(data, hint))
            data = decompressor.unconsumed_tail
            if decompressor.eof or not data:
                break

        blocks.append(decompressor.flush())
    except zlib.error as e:
        logger.debug(f'inflate failed: {e}')
        raise InflateError('inflate') from e

    if not decompressor.eof:
        raise InflateError('end')

    if decompressor.unused_data:
        logger.debug('ignoring %d bytes after the end of the stream' % len(decompressor.unused_data))

    return b''.join(blocks)


def gunzip(payload) -> bytes:
    return inflate(payload, wbits=GZIP_WBITS)


def identity(payload):
    return payload


DECOMPRESSORS = {
    CompressionType.GZIP: gunzip,
    CompressionType.ZLIB: inflate,
    CompressionType.NONE: identity,
}


def decompress(tag, payload) -> bytes:
    '''Return the decompressed payload; tag is a CompressionType or its integer value.

    Anything not in DECOMPRESSORS (external chunks included) raises UnsupportedCompression.'''
    try:
        compression = CompressionType(tag)
    except ValueError:
        raise UnsupportedCompression(tag) from None

    if compression not in DECOMPRESSORS:
        raise UnsupportedCompression(compression.value)

    return DECOMPRESSORS[compression](payload)
