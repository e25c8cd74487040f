"""Pseudo-random byte stream driven by repeated Blake2b-512 hashing."""

import hashlib

from randomx.parameters import BLAKE_GENERATOR_SEED_MAX_SIZE

_DATA_SIZE = 64


class BlakeGenerator:
    """Generator seeded with up to 60 bytes and a 32-bit nonce.

    The state is 64 bytes: the zero-padded seed followed by the nonce in
    little-endian order. When the remaining bytes are not enough for a
    request, the state is replaced by its Blake2b-512 digest.
    """

    def __init__(self, seed: bytes, nonce: int) -> None:
        seed = bytes(seed)
        if len(seed) > BLAKE_GENERATOR_SEED_MAX_SIZE:
            raise ValueError(
                f"seed must be at most {BLAKE_GENERATOR_SEED_MAX_SIZE} bytes, got {len(seed)}"
            )
        padded = seed.ljust(BLAKE_GENERATOR_SEED_MAX_SIZE, b"\x00")
        self.data = padded + (nonce & 0xFFFFFFFF).to_bytes(4, "little")
        self._index = _DATA_SIZE

    def update_state(self) -> None:
        """Replace the state with its Blake2b-512 digest and rewind."""
        self.data = hashlib.blake2b(self.data, digest_size=_DATA_SIZE).digest()
        self._index = 0

    def _take(self, count: int) -> bytes:
        if self._index + count > _DATA_SIZE:
            self.update_state()
        chunk = self.data[self._index:self._index + count]
        self._index += count
        return chunk

    def get_byte(self) -> int:
        """Return the next byte of the stream."""
        return self._take(1)[0]

    def get_u32(self) -> int:
        """Return the next four bytes of the stream as a big-endian integer."""
        return int.from_bytes(self._take(4), "big")