"""Common astronomical algorithms.

These algorithms follow :cite:t:`meeus_1998_algorithms` closely. The goal is to make all the
algorithms as simple to use as possible: every public function takes a date and returns a value.
"""
