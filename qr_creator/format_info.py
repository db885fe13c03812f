from . import capacity
from .grid import Module
from .skeleton import TIMING_LINE


def row_strip(size):
    '''
    Row 8 from the left: next to the top left search pattern, then under the top right one
    '''

    return [(x, 8) for x in range(size) if (x < 8 or x > size - 9) and x != TIMING_LINE]


def column_strip(size):
    '''
    Column 8 from the bottom: next to the bottom left search pattern, then up
    along the top left one, jumping over the horizontal sync lane
    '''

    cells = []
    for i in range(size):
        if (i < 7 or i > size - 10) and i != size - 7:
            cells.append((8, size - 1 - i))

    return cells


def write_format(grid, mask):
    sequence = capacity.format_sequence(mask)

    # Both strips carry the same 15 bits
    for strip in (row_strip(grid.size), column_strip(grid.size)):
        for (x, y), bit in zip(strip, sequence):
            grid.reserve(x, y, Module.from_bit(bit))

    return grid
