'''
Trying all eight masks and keeping the one with the lowest penalty
'''

import logging
from collections import namedtuple
from functools import partial

from . import capacity, penalty
from .format_info import write_format
from .placement import place_data
from .skeleton import build_skeleton


logger = logging.getLogger(__name__)

MaskTrial = namedtuple('MaskTrial', 'mask score grid')


def run_trial(skeleton, bits, mask, scorer=penalty.score):
    '''
    One candidate: format info and data for `mask` on a copy of the skeleton
    The skeleton itself is never touched, so trials can run side by side
    '''

    grid = skeleton.copy()
    write_format(grid, mask)
    place_data(grid, bits, mask)

    return MaskTrial(mask, scorer(grid), grid)


def best_trial(trials):
    best = None

    for trial in trials:
        logger.debug('Mask %d scored %d', trial.mask, trial.score)

        # Strictly less, so the lowest mask id wins a tie
        if best is None or (trial.score, trial.mask) < (best.score, best.mask):
            best = trial

    return best


def select_best_mask(version, bits, executor=None, scorer=None):
    '''
    Builds candidates for every mask and returns the winning MaskTrial

    With an executor (anything with a map() method, e.g. from concurrent.futures)
    the trials are spread across its workers; the result doesn't depend on
    the order they finish in
    '''

    skeleton = build_skeleton(version)
    trial = partial(run_trial, skeleton, bits, scorer=scorer or penalty.score)

    run = executor.map if executor is not None else map
    best = best_trial(run(trial, range(capacity.MASK_COUNT)))

    logger.info('Selected mask %d with penalty %d', best.mask, best.score)

    return best


def build_with_mask(version, bits, mask, scorer=None):
    '''
    Skips the search and uses the given mask, handy for debugging
    '''

    capacity.format_sequence(mask) # Fails early on a bad mask id

    return run_trial(build_skeleton(version), bits, mask, scorer=scorer or penalty.score)
