import logging

from PIL import Image, ImageDraw

from .config import RenderConfig
from .grid import Module


logger = logging.getLogger(__name__)


def to_image(grid, config=None):
    '''
    Draws the grid, one config.scale x config.scale square per module,
    surrounded by config.border white modules
    '''

    config = config or RenderConfig()
    side = config.scale
    res = (grid.size + 2 * config.border) * side

    image = Image.new(mode='RGBA', size=(res, res), color=config.light)
    draw = ImageDraw.Draw(image)

    for y, line in enumerate(grid.qr):
        for x, module in enumerate(line):
            if module is Module.DARK:
                left = (x + config.border) * side
                top = (y + config.border) * side
                draw.rectangle((left, top, left + side - 1, top + side - 1), fill=config.dark)

    return image


def save(grid, path=None, config=None):
    config = config or RenderConfig()
    path = path or config.output

    to_image(grid, config).save(path)

    logger.info('QR code saved to %s', path)

    return path
