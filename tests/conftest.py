import pytest


@pytest.fixture(scope="session")
def fat_timestamps_bytes() -> bytes:
    return bytes(
        [
            0x64,  # creation time, +1 s
            0x20,
            0x9B,  # creation time, 19:25:00
            0x7A,
            0x2D,  # creation date, 2002-11-26
            0x71,
            0x4D,  # last access date, 2018-11-17
            0x00,
            0x00,  # first cluster high word
            0xCF,
            0x54,  # write time, 10:38:30
            0x71,
            0x4D,  # write date, 2018-11-17
        ]
    )
