"""
Hash Function Primitives
=========================

Hash functions carry two nominal security strengths: collision
resistance (half the digest length) and pre-image resistance (the
digest length). Extendable-output functions use the strengths of
their security parameter.

Hash functions are compared by catalog id only.

References:
    - NIST SP 800-107 Rev. 1 (2012). Recommendation for Applications
      Using Approved Hash Algorithms.
    - FIPS 180-4 (2015). Secure Hash Standard.
    - FIPS 202 (2015). SHA-3 Standard.
    - RFC 7693 (2015). The BLAKE2 Cryptographic Hash and MAC.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Hash:
    """A hash function.

    Attributes:
        id: Catalog identifier.
        name: Canonical hash name.
        collision_resistance: Collision resistance in bits.
        pre_image_resistance: Pre-image resistance in bits.
    """

    id: int
    name: str
    collision_resistance: int
    pre_image_resistance: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hash):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((Hash, self.id))

    @classmethod
    def from_id(cls, hash_id: int) -> Hash:
        """Return the catalog hash for *hash_id*, or ``HASH_NOT_SUPPORTED``."""
        return HASH_CATALOG.get(hash_id, HASH_NOT_SUPPORTED)


HASH_NOT_SUPPORTED = Hash(0xFFFF, "unsupported", 0, 0)

BLAKE2B_256 = Hash(1, "blake2b256", 128, 256)
BLAKE2B_384 = Hash(2, "blake2b384", 192, 384)
BLAKE2B_512 = Hash(3, "blake2b512", 256, 512)
BLAKE2S_256 = Hash(4, "blake2s256", 128, 256)
MD4 = Hash(5, "md4", 64, 128)
MD5 = Hash(6, "md5", 64, 128)
RIPEMD160 = Hash(7, "ripemd160", 80, 160)
SHA1 = Hash(8, "sha1", 80, 160)
SHA224 = Hash(9, "sha224", 112, 224)
SHA256 = Hash(10, "sha256", 128, 256)
SHA384 = Hash(11, "sha384", 192, 384)
SHA512 = Hash(12, "sha512", 256, 512)
SHA3_224 = Hash(13, "sha3-224", 112, 224)
SHA3_256 = Hash(14, "sha3-256", 128, 256)
SHA3_384 = Hash(15, "sha3-384", 192, 384)
SHA3_512 = Hash(16, "sha3-512", 256, 512)
SHA512_224 = Hash(17, "sha512-224", 112, 224)
SHA512_256 = Hash(18, "sha512-256", 128, 256)
SHAKE128 = Hash(19, "shake128", 128, 128)
SHAKE256 = Hash(20, "shake256", 256, 256)


HASH_CATALOG: dict[int, Hash] = {
    func.id: func
    for func in (
        BLAKE2B_256, BLAKE2B_384, BLAKE2B_512, BLAKE2S_256,
        MD4, MD5, RIPEMD160, SHA1,
        SHA224, SHA256, SHA384, SHA512,
        SHA3_224, SHA3_256, SHA3_384, SHA3_512,
        SHA512_224, SHA512_256, SHAKE128, SHAKE256,
    )
}
