'''
Penalty score of a finished grid, lower is better

Rules work on rows of 0/1 (1 is black); the column-wise half of a rule is
the row-wise one applied to the transposed array
'''

from collections import namedtuple

from numpy import array as numpy_array


FINDER_LIKE = ('00001011101', '10111010000')

Breakdown = namedtuple('Breakdown', 'runs blocks finder_lines balance')


def _lines(qr):
    return [''.join(map(str, line)) for line in qr]


def score_runs_horizontal(qr):
    score = 0

    for bits in _lines(qr):
        black_lengths = [len(i) for i in bits.replace('0', ' ').split()]
        white_lengths = [len(i) for i in bits.replace('1', ' ').split()]

        # 3 for five in a row, plus one for every module after that
        score += sum(length - 2 for length in black_lengths + white_lengths if length >= 5)

    return score


def score_runs(qr):
    qr = numpy_array(qr)
    return score_runs_horizontal(qr) + score_runs_horizontal(qr.transpose())


def score_blocks(qr):
    score = 0
    size = len(qr[0])

    for x in range(size - 1):
        for y in range(size - 1):
            bit = qr[y][x]

            if qr[y + 1][x] == bit and qr[y][x + 1] == bit and qr[y + 1][x + 1] == bit:
                score += 3

    return score


def score_finder_lines_horizontal(qr):
    score = 0

    for bits in _lines(qr):
        # Overlapping windows count separately
        for start in range(len(bits) - 10):
            if bits[start:start + 11] in FINDER_LIKE:
                score += 40

    return score


def score_finder_lines(qr):
    qr = numpy_array(qr)
    return score_finder_lines_horizontal(qr) + score_finder_lines_horizontal(qr.transpose())


def score_balance(qr):
    qr = numpy_array(qr)

    total_black = int(qr.sum())
    total = qr.size

    percent = total_black * 100 // total
    lower = percent - percent % 5
    upper = lower + 5

    return 2 * min(abs(lower - 50), abs(upper - 50))


def score_breakdown(grid):
    qr = grid.to_array()

    return Breakdown(score_runs(qr), score_blocks(qr), score_finder_lines(qr), score_balance(qr))


def score(grid):
    return sum(score_breakdown(grid))
