"""
Bytecode Serialization and Hashing
==================================

The bytecode of an assembled unit is the hex encoding of the UTF-8 bytes
of its object code text. The content hash is the RIPEMD-160 digest of those
raw bytes (not of the hex string), in lowercase hex.
"""

from Crypto.Hash import RIPEMD160


def encode_bytecode(object_code: str) -> str:
    """Hex-encode the UTF-8 bytes of the object code."""
    return object_code.encode("utf-8").hex()


def decode_bytecode(bytecode: str) -> str:
    """Recover the object code text from hex bytecode."""
    return bytes.fromhex(bytecode).decode("utf-8")


def content_hash(bytecode: str) -> str:
    """
    Compute the content hash of hex bytecode.

    Raises:
        ValueError: If bytecode is not valid hex
    """
    return RIPEMD160.new(bytes.fromhex(bytecode)).hexdigest()
