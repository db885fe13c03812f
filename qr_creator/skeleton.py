'''
Everything on the grid that isn't data: search patterns with their white
separators, the alignment pattern, sync lanes and the dark module
'''

from . import capacity
from .grid import Grid, Module
from .patterns import alignment_template, finder_template, place_pattern, separator_template


TIMING_LINE = 6


def add_search_patterns(grid):
    '''
    Creates three squares in the corners of the QR, all but the bottom right one
    '''

    separator = separator_template()
    finder = finder_template()
    far = grid.size - 8

    # (separator corner, finder corner)
    corners = (((0, 0), (0, 0)),
               ((far, 0), (far + 1, 0)),
               ((0, far), (0, far + 1)))

    for (sx, sy), (fx, fy) in corners:
        place_pattern(grid, separator, sx, sy)
        place_pattern(grid, finder, fx, fy)


def add_leveling_pattern(grid, info):
    if info.alignment_center is None:
        return

    corner = info.alignment_center - 2
    place_pattern(grid, alignment_template(), corner, corner)


def add_sync_lanes(grid):
    '''
    Alternating black/white lines connecting the search patterns
    '''

    for num in range(8, grid.size - 8):
        module = Module.DARK if num % 2 == 0 else Module.LIGHT
        grid.reserve(num, TIMING_LINE, module)
        grid.reserve(TIMING_LINE, num, module)


def add_dark_module(grid, info):
    x, y = info.dark_module
    grid.reserve(x, y, Module.DARK)


def build_skeleton(version):
    info = capacity.lookup(version)
    grid = Grid(info.size)

    add_search_patterns(grid)
    add_leveling_pattern(grid, info)
    add_sync_lanes(grid)
    add_dark_module(grid, info)

    return grid
