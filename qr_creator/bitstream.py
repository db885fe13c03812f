'''
Turning raw bytes into the bit sequence that gets placed on the grid:
header, payload, terminator, padding, error correction
'''

import logging

from . import capacity, reed_solomon


logger = logging.getLogger(__name__)

PADDING_BYTES = (236, 17) # 11101100 and 00010001
TERMINATOR = 0b0000


class BitWriter:
    '''
    Append-only bit buffer

    Fields of any width are written most significant bit first,
    so a 12 bit header pushes every following byte 4 bits to the right
    '''

    def __init__(self):
        self._buffer = bytearray()
        self._length = 0

    def __len__(self):
        return self._length

    def append(self, value, width):
        for shift in range(width - 1, -1, -1):
            self.append_bit((value >> shift) & 1)

        return self

    def append_bit(self, bit):
        offset = self._length % 8

        if offset == 0:
            self._buffer.append(0)

        if bit:
            self._buffer[-1] |= 0x80 >> offset

        self._length += 1

    def to_codewords(self):
        # A partially filled last byte is padded with zeros
        return list(self._buffer)


def encode_payload(payload, max_length):
    '''
    Header + payload + terminator
    Anything longer than max_length is cut off without notice
    '''

    payload = bytes(payload[:max_length])

    writer = BitWriter()
    writer.append(capacity.MODE_BYTES, 4)
    writer.append(len(payload), 8)
    for byte in payload:
        writer.append(byte, 8)
    writer.append(TERMINATOR, 4)

    return writer.to_codewords()


def fill_sequence(codewords, final_length):
    '''
    Fills with alternating bytes 11101100 and 00010001 until length final_length is reached
    '''

    filled = list(codewords)

    counter = 0
    while len(filled) < final_length:
        filled.append(PADDING_BYTES[counter % 2])
        counter += 1

    return filled


def add_error_correction(codewords, ecc_length):
    return list(codewords) + list(reed_solomon.generate(codewords, ecc_length))


def codewords_to_bits(codewords):
    '''
    Example: [43, 42] -> 0010101100101010, as bools
    '''

    return tuple(bool(codeword >> shift & 1) for codeword in codewords for shift in range(7, -1, -1))


def encode(payload, version):
    info = capacity.lookup(version)

    if len(payload) > info.max_payload:
        logger.debug('Payload of %d bytes truncated to %d for version %d',
                     len(payload), info.max_payload, version)

    codewords = encode_payload(payload, info.max_payload)
    codewords = fill_sequence(codewords, info.data_codewords)
    codewords = add_error_correction(codewords, info.ecc_length)

    return codewords_to_bits(codewords)


def encode_text(text, version):
    # Characters outside of ISO-8859-1 become '?'
    return encode(text.encode('iso-8859-1', errors='replace'), version)
