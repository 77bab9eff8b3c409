#!/usr/bin/env python3
'''
Show which chunks of a region are present, brighter when saved more recently.

 $ regionmap.py r.0.0.mca            # opens a viewer
 $ regionmap.py r.0.0.mca map.png    # saves the image
'''
import logging
import sys
import os

from mcaregion.region import RegionFile
from mcaregion.render import occupancy_image


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

SCALE = 16


def usage(progname):
    print(f'usage: {progname} <region file> [<png file>]')
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    region = RegionFile(sys.argv[1])

    image = occupancy_image(region.locations, scale=SCALE)

    if len(sys.argv) > 2:
        image.save(sys.argv[2])
        logger.info(f'map saved to \'{sys.argv[2]}\'')
    else:
        image.show()
