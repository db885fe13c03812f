from enum import Enum

from numpy import array as numpy_array, uint8


class Module(Enum):
    UNSET = -1
    LIGHT = 0
    DARK = 1

    @classmethod
    def from_bit(cls, bit):
        return cls.DARK if bit else cls.LIGHT


class Grid:
    '''
    Square field of modules, addressed as (column, row)

    Cells written through reserve() make up the reserved set:
    finder, separator, alignment, timing, dark module and format cells.
    Data goes through place() and never lands there
    '''

    def __init__(self, size):
        self.size = size
        self.qr = [[Module.UNSET] * size for _ in range(size)]
        self.reserved = set()

    @classmethod
    def from_rows(cls, rows):
        '''
        Builds a grid from rows of 0/1 (or bools), nothing reserved
        '''

        grid = cls(len(rows))
        for y, line in enumerate(rows):
            assert len(line) == grid.size
            grid.qr[y] = [Module.from_bit(bit) for bit in line]

        return grid

    def __getitem__(self, position):
        x, y = position
        return self.qr[y][x]

    def reserve(self, x, y, module):
        self.qr[y][x] = module
        self.reserved.add((x, y))

    def place(self, x, y, module):
        self.qr[y][x] = module

    def is_reserved(self, x, y):
        return (x, y) in self.reserved

    def is_complete(self):
        return not any(Module.UNSET in line for line in self.qr)

    def copy(self):
        grid = Grid(self.size)
        grid.qr = [line.copy() for line in self.qr]
        grid.reserved = set(self.reserved)

        return grid

    def to_array(self):
        '''
        numpy array of rows, 1 is black, 0 is white (unset counts as white)
        '''

        return numpy_array([[int(module is Module.DARK) for module in line] for line in self.qr], dtype=uint8)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented

        return self.qr == other.qr

    def __repr__(self):
        return '<Grid %dx%d, %d reserved>' % (self.size, self.size, len(self.reserved))
