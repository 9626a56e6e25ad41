"""Show a decimal number in a float-like sign, exponent and mantissa layout."""

import math
import sys
from enum import IntEnum

_EPSILON = 0.0000001


class FloatKind(IntEnum):
    """The two layouts, numbered as in the interactive menu."""

    FLOAT = 1
    DOUBLE = 2

    @property
    def bits(self):
        """Total width of the layout in bits."""
        return 32 if self is FloatKind.FLOAT else 64

    @property
    def exponent_bits(self):
        """Width of the exponent field in bits."""
        return 8 if self is FloatKind.FLOAT else 11


def _field(value, width):
    bits = []
    for _ in range(width):
        bits.append(value & 1)
        value >>= 1
        if value == 0:
            break
    bits.extend([0] * (width - len(bits)))
    return "".join(str(bit) for bit in reversed(bits))


def float_to_binary(number, kind):
    """Return the sign, biased exponent and mantissa fields joined by dots.

    The exponent is the bias less the count of decimal places, and the
    mantissa holds the number's decimal digits as one binary integer.
    """
    kind = FloatKind(kind)
    number = float(number)
    if not math.isfinite(number):
        raise ValueError("number must be finite")

    sign = "1" if number < 0 else "0"
    number = abs(number)
    whole = int(number)
    number -= whole
    places = 0
    while number - int(number) > _EPSILON:
        number *= 10
        places += 1

    exponent_bits = kind.exponent_bits
    biased_exponent = (1 << (exponent_bits - 1)) - 1 - places
    mantissa = whole * 10**places + int(number)
    mantissa_bits = kind.bits - 1 - exponent_bits
    return ".".join(
        (sign, _field(biased_exponent, exponent_bits), _field(mantissa, mantissa_bits))
    )


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Ask for the layout and a number, then print its binary form."""
    tokens = _tokens(sys.stdin)
    print("Укажите тип данных (1 - float, 2 - double): ", end="", flush=True)
    while True:
        token = next(tokens, None)
        if token is None:
            return 1
        try:
            kind = FloatKind(int(token))
            break
        except ValueError:
            print("Введите тип данных снова: ", end="", flush=True)

    print("Введите число: ", end="", flush=True)
    token = next(tokens, None)
    try:
        number = float(token) if token is not None else 0.0
    except ValueError:
        number = 0.0
    print(float_to_binary(number, kind))
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())