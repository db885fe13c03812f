'''
Reed-Solomon correction codewords over GF(256), primitive polynomial 0x11d
'''

from functools import lru_cache


PRIMITIVE_POLYNOM = 0x11d


def _build_galua_field():
    # exp: power -> element, log: element -> power
    exp = [0] * 256
    log = [0] * 256

    value = 1
    for power in range(255):
        exp[power] = value
        log[value] = power
        value <<= 1
        if value & 0x100:
            value ^= PRIMITIVE_POLYNOM

    exp[255] = exp[0]

    return tuple(exp), tuple(log)


GALUA_FIELD, INVERSE_GALUA_FIELD = _build_galua_field()


def multiply(a, b):
    if a == 0 or b == 0:
        return 0

    return GALUA_FIELD[(INVERSE_GALUA_FIELD[a] + INVERSE_GALUA_FIELD[b]) % 255]


@lru_cache(maxsize=None)
def generating_polynom(degree):
    '''
    Product of (x - a^i) for i in 0..degree-1, leading coefficient dropped,
    every coefficient given as a power of a

    Example: 7 -> (87, 229, 146, 149, 238, 102, 21)
    '''

    polynom = [1]
    for i in range(degree):
        factor = [1, GALUA_FIELD[i]]
        product = [0] * (len(polynom) + 1)
        for j, a in enumerate(polynom):
            for k, b in enumerate(factor):
                product[j + k] ^= multiply(a, b)
        polynom = product

    return tuple(INVERSE_GALUA_FIELD[coefficient] for coefficient in polynom[1:])


def generate(data, ecc_length):
    '''
    Creates `ecc_length` correction codewords for the data codewords given
    Non-positive length means no correction at all
    '''

    if ecc_length <= 0:
        return []

    polynom = generating_polynom(ecc_length)

    prepared_array = list(data)
    if len(prepared_array) < ecc_length:
        prepared_array += [0] * (ecc_length - len(prepared_array))

    for _ in range(len(data)):
        A = prepared_array.pop(0)
        prepared_array.append(0)

        if A == 0:
            continue

        B = INVERSE_GALUA_FIELD[A]

        for i in range(ecc_length):
            prepared_array[i] ^= GALUA_FIELD[(B + polynom[i]) % 255]

    return prepared_array[:ecc_length]
