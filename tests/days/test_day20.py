from aoc2022.days import day20


def test_part_one(example):
    assert day20.part_one(example(20)) == 3


def test_part_two(example):
    assert day20.part_two(example(20)) == 1623178306


def test_mix_keeps_numbers(example):
    numbers = day20.parse(example(20))
    mixed = day20.mix(numbers)
    assert sorted(mixed) == sorted(numbers)
    zero = mixed.index(0)
    rotated = mixed[zero:] + mixed[:zero]
    assert rotated == [0, 3, -2, 1, 2, -3, 4]
