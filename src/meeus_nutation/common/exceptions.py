"""Contains all the custom-defined exceptions used in the nutation engine."""

from __future__ import annotations


class PolynomialCoefficientError(ValueError):
    """Exception indicating a polynomial was evaluated without any coefficients."""


class ObliquityRangeError(ValueError):
    """Exception indicating a date lies outside the validity range of an obliquity model."""

    def __init__(self, year: int, model: str = "Laskar"):
        """Build the error message around the offending calendar `year`.

        Args:
            year (``int``): calendar year of the rejected date.
            model (``str``, optional): name of the obliquity model that rejected it.
        """
        self.year = year
        self.model = model
        super().__init__(f"{model} mean obliquity is not valid for year {year}, outside of its time range")
