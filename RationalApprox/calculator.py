"""
Interactive fraction calculator: finds the fraction equivalent to a decimal number, adds and
multiplies fractions typed as "a/b".

    python -m RationalApprox.calculator
"""
from typing import Callable, Optional, Tuple

from RationalApprox.analyzer.farey import best_rational_approximation
from RationalApprox.arithmetic.fraction_ops import add_fractions, multiply_fractions
from RationalApprox.helpers.fraction_string import string_to_fraction, fraction_to_string
from RationalApprox.helpers.int_range import DENOMINATOR_MAX

MENU = "\n".join([
    "*" * 59,
    "Welcome to the fraction calculator",
    "A) Find the fraction equivalent to a decimal number",
    "B) Add two fractions",
    "C) Multiply two fractions",
    "Q) Quit",
    "*" * 59,
])


class FractionCalculator:
    def __init__(self, read: Callable[[], str] = input, write: Callable[[str], None] = print):
        self.read = read
        self.write = write
        self._actions = {}
        for keys, action in ((("A", "a", "1"), self.find_fraction),
                             (("B", "b", "2"), self.add),
                             (("C", "c", "3"), self.multiply)):
            for k in keys:
                self._actions[k] = action

    def find_fraction(self):
        self.write("Enter a decimal number")
        text = self.read()
        try:
            x = float(text)
        except ValueError:
            self.write("This is not a valid number")
            return
        try:
            n, d = best_rational_approximation(x, DENOMINATOR_MAX)
        except (OverflowError, ValueError) as e:
            self.write(f"Cannot convert {text.strip()}: {e}")
            return
        self.write(f"{text.strip()} = {fraction_to_string(n, d)}")

    def read_two_fractions(self) -> Optional[Tuple[int, int, int, int]]:
        """Ask for two fractions, None if either is invalid."""
        self.write("Enter the first fraction (a/b) where b != 0")
        ok, n1, d1 = string_to_fraction(self.read())
        if ok:
            self.write("Enter the second fraction (a/b) where b != 0")
            ok, n2, d2 = string_to_fraction(self.read())
            if ok:
                return n1, d1, n2, d2
        self.write("Invalid fraction(s)!")
        return None

    def _binary_op(self, title, symbol, op):
        self.write(title)
        fractions = self.read_two_fractions()
        if fractions is None:
            return
        n1, d1, n2, d2 = fractions
        try:
            n, d = op(n1, d1, n2, d2)
        except OverflowError as e:
            self.write(f"Result out of range: {e}")
            return
        self.write(f"{fraction_to_string(n1, d1)} {symbol} {fraction_to_string(n2, d2)} = "
                   f"{fraction_to_string(n, d)}")

    def add(self):
        self._binary_op("Addition of two fractions.", "+", add_fractions)

    def multiply(self):
        self._binary_op("Multiplication of two fractions.", "*", multiply_fractions)

    def run(self):
        while True:
            self.write(MENU)
            try:
                choice = self.read().strip()
            except EOFError:
                break
            if choice in ("Q", "q", "4"):
                break
            action = self._actions.get(choice)
            if action is None:
                self.write("Invalid choice.")
            else:
                try:
                    action()
                except EOFError:
                    break
        self.write("Thank you for using the fraction calculator")


def main():
    FractionCalculator().run()


if __name__ == "__main__":
    main()
