"""Small recursive exercises: digit sums, powers, GCD, Fibonacci, binary."""

import sys


def digit_sum(n):
    """Return the sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n if n < 10 else n % 10 + digit_sum(n // 10)


def _power(x, n):
    if n == 0:
        return 1.0
    if n % 2:
        return x * _power(x, n - 1)
    return _power(x * x, n // 2)


def quick_power(x, n):
    """Raise x to the non-negative integer power n by repeated squaring."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _power(float(x), n)


def _truncated_remainder(a, b):
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a, b):
    """Return the greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, _truncated_remainder(a, b)
    return a


def fibonacci_upto(n):
    """Yield Fibonacci numbers, starting 1, 1, that do not exceed n."""
    previous, current = 1, 1
    while previous <= n:
        yield previous
        previous, current = current, previous + current


def to_binary(n):
    """Return the binary digits of n; zero gives an empty string."""
    if n < 0:
        raise ValueError("n must not be negative")
    return format(n, "b") if n else ""


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _next_token(tokens):
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError from None


def _read_values(tokens, converters, accept, retry_prompt):
    while True:
        try:
            values = [convert(_next_token(tokens)) for convert in converters]
        except ValueError:
            values = None
        if values is not None and accept(*values):
            return values
        print(retry_prompt, end="", flush=True)


def _read_natural(tokens):
    print("Enter natural number: ", end="", flush=True)
    (n,) = _read_values(
        tokens,
        (int,),
        lambda value: value >= 1,
        "Pay attention, please!\nEnter natural number: ",
    )
    return n


def _task_digit_sum(tokens):
    print("Here you can get sum of number's digits")
    n = _read_natural(tokens)
    print(f"Sum of {n}'s digits: {digit_sum(n)}")


def _task_power(tokens):
    title = "Number x to the power of n\n"
    print(title, end="")
    print(
        "Enter numbers (x, n), separated by space "
        "(x - real number, n - natural number): ",
        end="",
        flush=True,
    )
    x, n = _read_values(
        tokens,
        (float, int),
        lambda _x, power: power >= 0,
        title + "Pay attention, please!\nEnter numbers (x, n), separated by space "
        "(x - a real number, n - a natural one): ",
    )
    print(f"\nYour number {x:g} to the power of {n}: {quick_power(x, n):g}")


def _task_gcd(tokens):
    title = "Greatest common divisor (GCD) of n and m\n"
    print(title, end="")
    print("Enter numbers (m, n), separated by space (m & n - integers): ", end="", flush=True)
    m, n = _read_values(
        tokens,
        (int, int),
        lambda _m, _n: True,
        title + "Pay attention, please!\nEnter numbers (m, n), separated by space "
        "(m & n - integers): ",
    )
    print(f"\nGCD of {m} and {n}: {gcd(m, n)}")


def _task_fibonacci(tokens):
    print("Fibonacci numbers to number n")
    n = _read_natural(tokens)
    print(f"Fibonacci numbers to {n}:")
    print(" ".join(str(number) for number in fibonacci_upto(n)))


def _task_binary(tokens):
    print("Number n in binary code")
    n = _read_natural(tokens)
    print(f"{n} in binary code: {to_binary(n)}")


def main(argv=None):
    """Run the five exercises in turn, reading numbers from standard input."""
    tokens = _tokens(sys.stdin)
    tasks = (_task_digit_sum, _task_power, _task_gcd, _task_fibonacci, _task_binary)
    try:
        for task in tasks:
            task(tokens)
    except EOFError:
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())