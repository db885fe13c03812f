from .grid import Module


def make_ring(template, module, position):
    '''
    Paints the border of the square starting `position` cells in from the edge
    Only the four edges are traced, the inside is left as it is
    '''

    last = len(template) - position - 1

    for i in range(position, last + 1):
        template[position][i] = module
        template[last][i] = module
        template[i][position] = module
        template[i][last] = module


def blank_template(size):
    return [[Module.UNSET] * size for _ in range(size)]


def finder_template():
    # Outer ring first, center last
    template = blank_template(7)
    make_ring(template, Module.DARK, 0)
    make_ring(template, Module.LIGHT, 1)
    make_ring(template, Module.DARK, 2)
    template[3][3] = Module.DARK

    return template


def separator_template():
    # Just a white frame, the finder pattern is stamped over it afterwards
    template = blank_template(8)
    make_ring(template, Module.LIGHT, 0)

    return template


def alignment_template():
    template = blank_template(5)
    make_ring(template, Module.DARK, 0)
    make_ring(template, Module.LIGHT, 1)
    template[2][2] = Module.DARK

    return template


def place_pattern(grid, template, x, y):
    '''
    Copies the painted cells of the template into the grid, (x, y) being its top left corner
    '''

    for i, line in enumerate(template):
        for j, module in enumerate(line):
            if module is not Module.UNSET:
                grid.reserve(x + j, y + i, module)
