#!/usr/bin/env python3
'''
Decompress all the chunks of a region file into a single file,
one payload after the other without separators.

 $ regionextract.py r.0.0.mca decompressed_chunks.dat
'''
import logging
import os
import sys

from mcaregion.exceptions import TruncatedHeader
from mcaregion.region import RegionFile


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = 'decompressed_chunks.dat'


def usage(progname):
    print(f'usage: {progname} <region file> [<output file, default {DEFAULT_OUTPUT}>]')
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]
    output = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_OUTPUT

    try:
        region = RegionFile(path)
        locations = region.locations

        with open(output, 'wb') as sink:
            report = region.extract(sink)
    except (OSError, TruncatedHeader) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    logger.info(f'{len(report.written)}/{len(locations)} chunks, {report.size} bytes ({len(report.failures)} skipped)')
    print(f'Decompressed chunk data saved to \'{output}\'')
