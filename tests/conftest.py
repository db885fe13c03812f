import pytest

from qr_creator import bitstream


@pytest.fixture(scope='session')
def google_bits():
    """Bit sequence of the reference payload, version 5."""
    return bitstream.encode(b'google.com', 5)
