from collections import Counter


def find_marker(stream: str, size: int) -> int:
    """1-based position of the last character of the first window of `size` distinct characters."""
    stream = stream.strip()
    window = Counter(stream[:size])
    if len(stream) >= size and len(window) == size:
        return size

    for i in range(size, len(stream)):
        outgoing = stream[i - size]
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        window[stream[i]] += 1

        if len(window) == size:
            return i + 1

    raise RuntimeError(f"No marker of {size} distinct characters in stream")


def part_one(text: str) -> int:
    return find_marker(text, 4)


def part_two(text: str) -> int:
    return find_marker(text, 14)
