"""Conversion between Arabic and Roman numerals."""

import sys

ROMAN_SYMBOLS = "IVXLCDM"
ROMAN_VALUES = (1, 5, 10, 50, 100, 500, 1000)

_INDEX_OF = {symbol: index for index, symbol in enumerate(ROMAN_SYMBOLS)}

_GREEDY = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

MENU = (
    "Please, choose what you need to convert (what do you have otherwise?):\n"
    "1) arabic numerals;\n"
    "2) roman numerals.\n"
    "q - to quit\n"
    "Your choice: "
)

SYMBOL_HELP = (
    "Some of your symbols cannot be roman numerals.\n"
    "Roman numerals: I:\t1\n"
    "\t\tV:\t5\n"
    "\t\tX:\t10\n"
    "\t\tL:\t50\n"
    "\t\tC:\t100\n"
    "\t\tD:\t500\n"
    "\t\tM:\t1000\n"
)

ORDER_HELP = (
    "Wrong order.\n"
    "Right order: thousands, hundreds, tens, units\n"
    "Some digits (I, X, C, M) can be repeated not more than 3 times in a row\n"
)

_RULE = "=" * 71


class RomanNumeralError(ValueError):
    """A number or numeral that cannot be converted."""


class InvalidSymbolError(RomanNumeralError):
    """The numeral holds a character that is not a Roman digit."""


class WrongOrderError(RomanNumeralError):
    """The Roman digits stand in an order that is not allowed."""


def to_roman(number):
    """Return the Roman numeral for a positive integer."""
    if number <= 0:
        raise RomanNumeralError(f"{number} has no Roman numeral")
    parts = []
    for value, symbols in _GREEDY:
        count, number = divmod(number, value)
        parts.append(symbols * count)
    return "".join(parts)


def _breaks_order(first, second):
    return (
        (first in (0, 3) and second > 2)
        or (first in (2, 5) and second > 4)
        or (first == 1 and second > 0)
        or (first in (1, 3) and first == second)
    )


def to_arabic(text):
    """Return the value of a Roman numeral, in either letter case."""
    symbols = text.upper()
    if not symbols:
        raise RomanNumeralError("empty numeral")
    invalid = sorted({symbol for symbol in symbols if symbol not in _INDEX_OF})
    if invalid:
        raise InvalidSymbolError(f"not Roman digits: {''.join(invalid)}")

    indices = [_INDEX_OF[symbol] for symbol in symbols]
    total = 0
    repeated = None
    position = 0
    while position < len(indices):
        first = indices[position]
        if position + 1 == len(indices):
            total += ROMAN_VALUES[first]
            break
        second = indices[position + 1]
        if _breaks_order(first, second) or repeated == second:
            raise WrongOrderError(f"wrong order in {text!r}")
        if first > second:
            total += ROMAN_VALUES[first]
            position += 1
            continue
        if first < second:
            total += ROMAN_VALUES[second] - ROMAN_VALUES[first]
            repeated = None
        else:
            total += 2 * ROMAN_VALUES[first]
            repeated = first
        position += 2
    return total


def _ask(prompt):
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _report_roman_error(error):
    print("Input error!")
    print(f"\n{_RULE}\n")
    if isinstance(error, InvalidSymbolError):
        print(SYMBOL_HELP, end="")
    elif isinstance(error, WrongOrderError):
        print(ORDER_HELP, end="")
    print(f"\n\n{_RULE}\n")


def _convert_arabic():
    text = _ask("Enter arabic number: ")
    if text is None:
        return False
    try:
        numeral = to_roman(int(text.strip()))
    except ValueError:
        print("Input error!")
    else:
        print(f"Your number: {numeral}")
    return True


def _convert_roman():
    text = _ask("Enter roman number: ")
    if text is None:
        return False
    try:
        value = to_arabic(text)
    except RomanNumeralError as error:
        _report_roman_error(error)
    else:
        print(f"Your number: {value}")
    return True


def main(argv=None):
    """Run the interactive converter; argv is accepted and not used."""
    actions = {"1": _convert_arabic, "2": _convert_roman}
    while True:
        choice = _ask(MENU)
        if choice is None or choice == "q":
            print("Bye!")
            return 0
        action = actions.get(choice)
        if action is None:
            print("Pay attention!")
        elif not action():
            print("Bye!")
            return 0


if __name__ == "__main__":
    sys.exit(main())