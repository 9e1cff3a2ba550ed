"""Helpers shared by the unit tests."""


def feed(algorithm, data, sizes):
    """Initialize `algorithm` and feed `data` cut into pieces of the given sizes (cycled)."""
    algorithm.initialize()
    pos = 0
    i = 0
    while pos < len(data):
        size = sizes[i % len(sizes)]
        algorithm.update(data[pos:pos + size])
        pos += size
        i += 1
    return algorithm.finalize()


def random_partition(data, rng, include_empty=True):
    """Split `data` at random points, optionally with empty chunks mixed in."""
    pieces = []
    pos = 0
    while pos < len(data):
        if include_empty and rng.random() < 0.2:
            pieces.append(b"")
        size = rng.randint(1, 97)
        pieces.append(data[pos:pos + size])
        pos += size
    return pieces


def bytewise_crc(data, polynomial, width, crc=0):
    """Bit-at-a-time reflected CRC, independent of any lookup table."""
    mask = (1 << width) - 1
    crc = ~crc & mask
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ (polynomial if crc & 1 else 0)
    return ~crc & mask
