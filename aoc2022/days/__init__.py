"""
One module per puzzle day. Each exposes ``part_one(text)`` and ``part_two(text)``.
"""
