from .exceptions import ConfigurationError
from .grid import Module
from .skeleton import TIMING_LINE


MASKS = {0: lambda x, y: (x + y) % 2 == 0,
         1: lambda x, y: y % 2 == 0,
         2: lambda x, y: x % 3 == 0,
         3: lambda x, y: (x + y) % 3 == 0,
         4: lambda x, y: (y // 2 + x // 3) % 2 == 0,
         5: lambda x, y: (x * y) % 2 + (x * y) % 3 == 0,
         6: lambda x, y: ((x * y) % 2 + (x * y) % 3) % 2 == 0,
         7: lambda x, y: ((x + y) % 2 + (x * y) % 3) % 2 == 0}


def get_mask(mask):
    try:
        return MASKS[mask]
    except (KeyError, TypeError):
        raise ConfigurationError('Mask id must be in 0..7, got %r' % (mask,)) from None


def mask_predicate(x, y, mask):
    '''
    True where the mask inverts the module at column x, row y
    '''

    return get_mask(mask)(x, y)


class ZigzagCursor:
    '''
    Walks the grid two columns at a time, starting in the bottom right corner

    Goes up the first pair of columns, then down the next one, and so on.
    The vertical sync lane is jumped over, so the pair right after it is
    shifted one column to the left
    '''

    def __init__(self, size, timing_column=TIMING_LINE):
        self.size = size
        self.timing_column = timing_column
        self.x = size - 1
        self.y = size - 1
        self.going = 'up'

    def is_done(self):
        return self.x < 0

    def pair(self):
        # Right cell first
        cells = [(self.x, self.y)]
        if self.x > 0:
            cells.append((self.x - 1, self.y))

        return cells

    def advance(self):
        step = -1 if self.going == 'up' else 1

        if 0 <= self.y + step < self.size:
            self.y += step
            return

        # Reached the edge: turn around and move to the next pair of columns
        self.going = 'down' if self.going == 'up' else 'up'
        self.x -= 2
        if self.x == self.timing_column:
            self.x -= 1


def traversal(size):
    '''
    Every (x, y) in the order data is written, reserved cells included
    '''

    cursor = ZigzagCursor(size)
    while not cursor.is_done():
        yield from cursor.pair()
        cursor.advance()


def place_data(grid, bits, mask):
    '''
    Finally filling all space left with our data

    Once the bits run out the remaining cells get masked zeros
    '''

    predicate = get_mask(mask)
    index = 0

    for x, y in traversal(grid.size):
        if grid.is_reserved(x, y):
            continue

        bit = bits[index] if index < len(bits) else False
        index += 1

        grid.place(x, y, Module.from_bit(bool(bit) != predicate(x, y)))

    return grid
