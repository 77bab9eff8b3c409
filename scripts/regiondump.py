#!/usr/bin/env python3
import sys
import os
import logging

from mcaregion.exceptions import ChunkException
from mcaregion.region import RegionFile

if 'DEBUG' in os.environ:
    logging.basicConfig()
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)


def usage(progname):
    print('usage: %s <region file>' % progname)
    sys.exit(1)


def dump_region(region):
    coords = region.coords
    locations = region.locations
    print(f'''Region:
  Path:                              {region.path}
  Coordinates:                       {coords if coords else "unknown"}
  Size:                              {len(region.data)} (bytes)
  Chunks:                            {len(locations)}''')


def dump_chunks(region):
    coords = region.coords
    print('''Chunks:
  [Slot] X   Z   Offset     Sectors Modified                   Length     Compression''')
    for location, record in region.iter_chunks():
        x, z = location.world_coords(*coords) if coords else (location.x, location.z)
        prefix = f'''  [{location.slot: >4d}] {x:<3d} {z:<3d} 0x{location.byte_offset:08x} {location.sector_count:<7d} {location.modified.isoformat():<26}'''
        if isinstance(record, ChunkException):
            print(f'{prefix} {record}')
            continue

        external = ' (external)' if record.is_external else ''
        print(f'''{prefix} {record.length.value:<10d} {record.compression.value}{external}''')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    region = RegionFile(sys.argv[1])

    dump_region(region)
    dump_chunks(region)
