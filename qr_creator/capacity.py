from dataclasses import dataclass
from typing import Optional
from types import MappingProxyType

from .exceptions import ConfigurationError


MODE_BYTES = 0b0100
MASK_COUNT = 8

# Level L, one Reed-Solomon block per symbol
# version: (data codewords, correction codewords, alignment pattern centre)
_VERSIONS = {1: (19, 7, None),
             2: (34, 10, 18),
             3: (55, 15, 22),
             4: (80, 20, 26),
             5: (108, 26, 30)}

# Level L format strings, already BCH-encoded and XOR-ed with 101010000010010
_FORMAT_STRINGS = {0: '111011111000100',
                   1: '111001011110011',
                   2: '111110110101010',
                   3: '111100010011101',
                   4: '110011000101111',
                   5: '110001100011000',
                   6: '110110001000001',
                   7: '110100101110110'}

FORMAT_SEQUENCES = MappingProxyType({mask: tuple(bit == '1' for bit in code)
                                     for mask, code in _FORMAT_STRINGS.items()})


@dataclass(frozen=True)
class VersionInfo:
    version: int
    data_codewords: int
    ecc_length: int
    alignment_center: Optional[int] = None

    @property
    def size(self):
        # The size of the QR code depends only on its version
        return 17 + self.version * 4

    @property
    def max_payload(self):
        # 12 bits of header plus 4 bits of terminator take two codewords
        return self.data_codewords - 2

    @property
    def total_codewords(self):
        return self.data_codewords + self.ecc_length

    @property
    def dark_module(self):
        return 8, self.size - 8

    @staticmethod
    def format_sequence(mask):
        return format_sequence(mask)


_TABLE = MappingProxyType({version: VersionInfo(version, *row) for version, row in _VERSIONS.items()})

SUPPORTED_VERSIONS = tuple(sorted(_TABLE))


def lookup(version):
    try:
        return _TABLE[version]
    except (KeyError, TypeError):
        raise ConfigurationError(
            'Unsupported version %r, expected one of %s' % (version, ', '.join(map(str, SUPPORTED_VERSIONS)))
        ) from None


def format_sequence(mask):
    '''
    15 format bits (error correction level + mask id) for the given mask
    '''

    try:
        return FORMAT_SEQUENCES[mask]
    except (KeyError, TypeError):
        raise ConfigurationError('Mask id must be in 0..%d, got %r' % (MASK_COUNT - 1, mask)) from None


def smallest_version(length):
    '''
    First version able to hold `length` payload bytes
    Falls back to the biggest one, the encoder truncates what doesn't fit
    '''

    for version in SUPPORTED_VERSIONS:
        if _TABLE[version].max_payload >= length:
            return version

    return SUPPORTED_VERSIONS[-1]
