import logging

from PIL import Image

from .region.header import REGION_WIDTH


logger = logging.getLogger(__name__)

ABSENT_COLOR = (0, 0, 0)


def age_color(timestamp, oldest, newest):
    '''Green, brighter for the chunks saved more recently.'''
    if newest == oldest:
        return (0, 255, 0)

    ratio = (timestamp - oldest) / (newest - oldest)

    return (0, 64 + int(191 * ratio), 0)


def occupancy_image(locations, scale=1):
    '''Map of the 32x32 chunks of a region: one pixel (scale x scale once
    resized) per slot, black when the chunk is not present.'''
    image = Image.new('RGB', (REGION_WIDTH, REGION_WIDTH), ABSENT_COLOR)

    if locations:
        timestamps = [_.timestamp for _ in locations]
        oldest, newest = min(timestamps), max(timestamps)

        for location in locations:
            image.putpixel((location.x, location.z), age_color(location.timestamp, oldest, newest))

    logger.debug(f'rendered {len(locations)} chunks')

    if scale != 1:
        image = image.resize((REGION_WIDTH * scale, REGION_WIDTH * scale), Image.NEAREST)

    return image
