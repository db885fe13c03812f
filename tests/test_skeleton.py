"""
Unit tests for qr_creator.patterns and qr_creator.skeleton.
"""

import pytest

from qr_creator import capacity
from qr_creator.exceptions import ConfigurationError
from qr_creator.grid import Module
from qr_creator.patterns import (
    alignment_template,
    blank_template,
    finder_template,
    make_ring,
    separator_template,
)
from qr_creator.skeleton import build_skeleton

D, L, U = Module.DARK, Module.LIGHT, Module.UNSET


class TestPatterns:
    """Tests for ring drawing and pattern templates."""

    def test_make_ring_leaves_inside_alone(self):
        template = blank_template(5)
        make_ring(template, D, 1)
        assert template[1] == [U, D, D, D, U]
        assert template[2] == [U, D, U, D, U]
        assert template[0] == [U] * 5

    def test_finder_template(self):
        template = finder_template()
        assert template[0] == [D] * 7
        assert template[1] == [D, L, L, L, L, L, D]
        assert template[3] == [D, L, D, D, D, L, D]

    def test_separator_is_a_light_frame(self):
        template = separator_template()
        assert template[0] == [L] * 8
        assert template[7] == [L] * 8
        assert template[3] == [L] + [U] * 6 + [L]

    def test_alignment_template(self):
        template = alignment_template()
        assert template[0] == [D] * 5
        assert template[2] == [D, L, D, L, D]


class TestBuildSkeleton:
    """Tests for build_skeleton()."""

    @pytest.mark.parametrize('version', capacity.SUPPORTED_VERSIONS)
    def test_size(self, version):
        assert build_skeleton(version).size == 4 * version + 17

    def test_search_patterns_in_three_corners(self):
        grid = build_skeleton(1)
        last = grid.size - 1
        assert grid[0, 0] is D
        assert grid[1, 1] is L
        assert grid[3, 3] is D
        assert grid[last, 0] is D
        assert grid[0, last] is D
        assert grid[last, last] is U

    def test_separators_surround_finders(self):
        grid = build_skeleton(1)
        far = grid.size - 8
        assert grid[7, 7] is L
        assert grid[7, 0] is L
        assert grid[far, 0] is L
        assert grid[far, 7] is L
        assert grid[0, far] is L
        assert grid[7, far] is L

    def test_sync_lanes_start_dark(self):
        grid = build_skeleton(2)
        assert grid[8, 6] is D
        assert grid[9, 6] is L
        assert grid[6, 8] is D
        assert grid[6, 9] is L
        assert grid[grid.size - 9, 6] is D

    def test_dark_module(self):
        grid = build_skeleton(3)
        assert grid[8, grid.size - 8] is D

    def test_alignment_pattern(self):
        grid = build_skeleton(2)
        assert grid[18, 18] is D
        assert grid[17, 17] is L
        assert grid[16, 16] is D
        assert grid[20, 18] is D

    @pytest.mark.parametrize('version, reserved', [(1, 203), (2, 236)])
    def test_reserved_count(self, version, reserved):
        # 3 x 64 search pattern cells, sync lanes, dark module, alignment pattern
        assert len(build_skeleton(version).reserved) == reserved

    def test_every_painted_cell_is_reserved(self):
        grid = build_skeleton(4)
        for y in range(grid.size):
            for x in range(grid.size):
                assert (grid[x, y] is not U) == grid.is_reserved(x, y)

    def test_unsupported_version(self):
        with pytest.raises(ConfigurationError):
            build_skeleton(9)
