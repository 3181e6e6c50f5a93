from __future__ import annotations

import hashlib

BLOCK_SIZE = 16
KEY_SIZE = 16

_ZERO_BLOCK = bytes(BLOCK_SIZE)


def _as_bytes(seed: bytes | bytearray | str) -> bytes:
    if isinstance(seed, str):
        return seed.encode("utf-8")
    return bytes(seed)


def derive_key(seed: bytes) -> bytes:
    # The whole seed is digested so that seeds differing only in trailing
    # zero bytes (swallowed by chunk padding) still get different keys.
    return hashlib.md5(seed, usedforsecurity=False).digest()


def permute(key: bytes, block: bytes) -> bytes:
    return hashlib.blake2b(block, key=key, digest_size=BLOCK_SIZE).digest()


def seed_chunks(seed: bytes) -> list[bytes]:
    out: list[bytes] = []
    for start in range(0, len(seed), BLOCK_SIZE):
        chunk = seed[start : start + BLOCK_SIZE]
        out.append(chunk.ljust(BLOCK_SIZE, b"\x00"))
    return out


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


class DeterministicStream:
    """Reproducible, unbounded pseudorandom byte stream.

    Not a secure generator. The hash primitives are only there because they
    mix well; nothing built on this stream relies on any cryptographic
    property.

    The key is the MD5 of the whole seed. The initial block is obtained by
    chaining the seed through the keyed permutation 16 bytes at a time,
    starting from ``iv`` (all zeroes for a root stream). Output bytes are
    successive permutations of the block.

    ``fork`` builds a child the same way, using the parent's current block as
    ``iv``. The parent is only read, so forking twice with the same extra seed
    gives two identical children and never changes the parent's output.
    """


    def __init__(self, seed: bytes | bytearray | str = b"", *, iv: bytes | None = None):
        seed = _as_bytes(seed)
        if iv is None:
            iv = _ZERO_BLOCK
        elif len(iv) != BLOCK_SIZE:
            raise ValueError(f"iv must be {BLOCK_SIZE} bytes, got {len(iv)}")

        self._key = derive_key(seed)
        data = bytes(iv)
        for chunk in seed_chunks(seed):
            data = permute(self._key, _xor(data, chunk))
        self._block = data
        self._left = BLOCK_SIZE

    @classmethod
    def with_seed(cls, seed: bytes | bytearray | str) -> DeterministicStream:
        return cls(seed)

    @property
    def state_block(self) -> bytes:
        return self._block

    def fork(self, extra_seed: bytes | bytearray | str) -> DeterministicStream:
        # Deliberately does not consume from self, even if the block is
        # partially used.
        return DeterministicStream(extra_seed, iv=self._block)

    def _refill(self) -> None:
        self._block = permute(self._key, self._block)
        self._left = BLOCK_SIZE

    def fill(self, n: int) -> bytes:
        n = int(n)
        if n < 0:
            raise ValueError("n must be >= 0")
        if n == 0:
            return b""

        if n <= self._left:
            start = BLOCK_SIZE - self._left
            self._left -= n
            return self._block[start : start + n]

        parts: list[bytes] = []
        if self._left > 0:
            parts.append(self._block[BLOCK_SIZE - self._left :])
        remaining = n - self._left
        self._left = 0

        while remaining > BLOCK_SIZE:
            self._refill()
            parts.append(self._block)
            remaining -= BLOCK_SIZE

        self._refill()
        parts.append(self._block[:remaining])
        self._left = BLOCK_SIZE - remaining
        return b"".join(parts)

    def next_u32(self) -> int:
        return int.from_bytes(self.fill(4), "big")

    def next_u64(self) -> int:
        return int.from_bytes(self.fill(8), "big")

    def random(self) -> float:
        """Uniform float in [0, 1) from the top 53 bits of a u64."""
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def __repr__(self) -> str:
        return f"DeterministicStream(block={self._block.hex()}, left={self._left})"
