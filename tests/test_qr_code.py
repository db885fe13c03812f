"""
Integration tests for the QRcode facade, rendering and the command line.
"""

import pytest
from PIL import Image

from qr_creator import QRcode, RenderConfig, penalty
from qr_creator.__main__ import main
from qr_creator.exceptions import ConfigurationError


@pytest.fixture(scope='module')
def google():
    return QRcode('google.com', version=5)


class TestQRcode:
    """Tests for QRcode."""

    def test_reference_symbol(self, google):
        assert google.version == 5
        assert google.size == 37
        assert 0 <= google.mask <= 7
        assert google.qr.is_complete()

    def test_score_matches_grid(self, google):
        assert google.score == penalty.score(google.qr)

    def test_to_array(self, google):
        array = google.to_array()
        assert array.shape == (37, 37)
        assert set(array.flatten().tolist()) == {0, 1}

    def test_bytes_and_text_agree(self, google):
        assert QRcode(b'google.com', version=5).qr == google.qr

    @pytest.mark.parametrize('length, version', [(2, 1), (40, 3), (300, 5)])
    def test_version_picked_from_length(self, length, version):
        assert QRcode(b'x' * length).version == version

    def test_forced_mask(self):
        assert QRcode('abc', version=1, mask=4).mask == 4

    def test_unsupported_version(self):
        with pytest.raises(ConfigurationError):
            QRcode('abc', version=10)


class TestRendering:
    """Tests for to_image() and save()."""

    def test_image_size_includes_border(self):
        qr = QRcode('abc', version=1, config=RenderConfig(scale=4, border=2))
        assert qr.to_image().size == ((21 + 4) * 4, (21 + 4) * 4)

    def test_colours(self):
        config = RenderConfig(scale=3, border=1)
        image = QRcode('abc', version=1, config=config).to_image()
        assert image.getpixel((0, 0)) == config.light
        # top left module of the search pattern
        assert image.getpixel((3, 3)) == config.dark
        assert image.getpixel((5, 5)) == config.dark
        # first white ring of the search pattern
        assert image.getpixel((6, 6)) == config.light

    def test_save(self, tmp_path):
        path = tmp_path / 'qr.png'
        qr = QRcode('abc', version=2, config=RenderConfig(scale=2))
        assert qr.save(path) == path
        with Image.open(path) as image:
            assert image.size == ((25 + 4) * 2, (25 + 4) * 2)


class TestMain:
    """Tests for the command line entry point."""

    def test_writes_image(self, tmp_path):
        path = tmp_path / 'out.png'
        assert main(['hello', '--version', '1', '--scale', '2', '--output', str(path)]) == 0
        assert path.exists()

    def test_bad_version_exit_code(self, tmp_path, capsys):
        assert main(['hello', '--version', '9', '--output', str(tmp_path / 'x.png')]) == 2
        assert 'Unsupported version' in capsys.readouterr().err
