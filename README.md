# lessonkit

Small programming exercises, each usable as a library function and as a
console command.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `lessonkit-roman` | Menu-driven converter between Arabic and Roman numerals; `q` quits |
| `lessonkit-recursion` | Runs five tasks in turn on numbers read from standard input: digit sum, power, GCD, Fibonacci numbers, binary digits |
| `lessonkit-float-binary` | Asks for a layout (1 for 32 bits, 2 for 64 bits) and a number, and prints it as sign, exponent and mantissa fields |
| `lessonkit-bitflip [FILE]` | Reverses the file's byte order and the bits of every byte, writing the result back in place; asks for the name if none is given |
| `lessonkit-moon [DIRECTORY]` | Asks for a date (`DD.MM.YYYY`), reads `moon<YEAR>.dat` from the directory (default: the current one) and prints moonrise, moonset and the moment of the highest point |
| `lessonkit-min-perimeter` | Times the least-perimeter triangle search on random point sets of growing size |

`lessonkit-min-perimeter` takes `--max-power` (default 6; sizes run from
1·10² to 9·10^max-power), `--output` (default `timer_algo.dat`, one
`size<TAB>seconds` line per run) and `--seed` for reproducible points.

## Library use

```python
from lessonkit.roman import to_roman, to_arabic
from lessonkit.recursion import digit_sum, quick_power, gcd, fibonacci_upto, to_binary
from lessonkit.float_binary import FloatKind, float_to_binary
from lessonkit.bitflip import reverse_bits, transform, process_file
from lessonkit.min_perimeter import Point, perimeter, min_perimeter_triangle, random_points

to_roman(1994)              # 'MCMXCIV'
to_arabic("mcmxciv")        # 1994
gcd(48, 18)                 # 6
list(fibonacci_upto(10))    # [1, 1, 2, 3, 5, 8]
to_binary(5)                # '101'
transform(b"\x01\x02")      # b'@\x80'
```

### Roman numerals

`to_roman` raises `RomanNumeralError` for numbers below 1. `to_arabic`
accepts either letter case and raises `InvalidSymbolError` for characters
that are not Roman digits and `WrongOrderError` when digits stand in a
disallowed order; both derive from `RomanNumeralError`, itself a
`ValueError`.

### Float layout

`float_to_binary(number, kind)` with `FloatKind.FLOAT` or `FloatKind.DOUBLE`
returns `sign.exponent.mantissa` as a string of bits. This is a teaching
layout, not the machine encoding: the exponent field is the bias less the
number of decimal places, and the mantissa field holds the number's decimal
digits as one binary integer.

### Least-perimeter triangle

`min_perimeter_triangle(points)` takes `Point(x, y, id)` values and returns
`(perimeter, (a, b, c))`. It raises `ValueError` when the search examines no
triangle, which is the case for fewer than four points.

### Moon tables

`lessonkit.moon` provides `is_valid_date`, `parse_date`, `read_table`,
`analyse` and `format_report`. `analyse(date, text)` scans the table text
from the first row of the date and returns a `MoonReport` holding up to two
`MoonEvent` entries (moonrise, then moonset) and the zenith time; it raises
`LookupError` when the date does not appear in the table.

## What it does not do

No moon tables are included: `lessonkit-moon` needs a `moon<YEAR>.dat` file
of whitespace-separated rows (date, hour, minute, second, then columns of
which the seventh field is the altitude angle) supplied by the user.