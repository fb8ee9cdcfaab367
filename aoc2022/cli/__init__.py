"""
Command line entry points: ``aoc-solve``, ``aoc-all`` and ``aoc-check``.
"""
