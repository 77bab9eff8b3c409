"""
# mcaregion: Minecraft region files for humans.

A region file is a container of up to 1024 chunks, each one compressed on its
own and addressed by a fixed size header. The formats are described declaratively
(see core.Chunk and fields) and unpacked from a Stream:

 1. region.header: the location and timestamp tables.
 2. region.chunk: the length-prefixed, compression-tagged chunk records.
 3. compression: gzip/zlib/uncompressed payloads.

The typical usage is

    region = RegionFile('r.0.0.mca')
    with open('decompressed_chunks.dat', 'wb') as sink:
        report = region.extract(sink)

where chunks that can't be decoded end up in report.failures instead of
stopping the extraction.
"""
from .region import RegionFile, ExtractionReport, parse_header, parse_region_name
from .region.chunk import extract
from .compression import decompress
