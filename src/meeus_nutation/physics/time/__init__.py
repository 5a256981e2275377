"""Contains classes and conversion functions for different definitions of time.

Every public function in :mod:`.transforms` accepts any :data:`.DateLike` value and
funnels it through :func:`.getJulianDate`, so callers may hand in a ``datetime`` or a
:class:`.JulianDate` interchangeably.
"""
