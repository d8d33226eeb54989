"""
SmallC ASM Opcode Table
=======================

This module defines the mnemonic table of the SmallC stack machine. Every
mnemonic is encoded as a single character in the object code; the operand
list that follows it is copied through unchanged (after literal, symbol and
relative-address processing).

Operand-taking vs. bare mnemonics
---------------------------------
Most instructions take a comma-terminated operand list and are written with
a single space after the mnemonic:

    EVAL32 gi0,42,      ->  Cgi0,42,
    CALL 0,.init,       ->  L0,.init,   (relative address resolved later)

The space is part of the keyword and is consumed by the encoding. A handful
of instructions take no operands (RETURN, STOP, NOP, ...) and are matched on
their own.

Matching rules
--------------
A keyword only matches at a word boundary and only when followed by a space,
'@' or another word boundary, so that a mnemonic never clips a longer
identifier (ALLOC inside MALLOC, HASH inside HASH160). Word boundaries use
ASCII semantics. Each keyword is applied once per line, in table order.
"""

from dataclasses import dataclass
from typing import Optional
import re


# =============================================================================
# Opcode Information
# =============================================================================

@dataclass(frozen=True)
class OpcodeInfo:
    """
    Encoding of a single mnemonic.

    Attributes:
        mnemonic: Upper-case instruction name (e.g. "EVAL32")
        opcode: Single output character (e.g. "C")
        takes_operands: True if the mnemonic is followed by an operand list
    """
    mnemonic: str
    opcode: str
    takes_operands: bool = True

    @property
    def keyword(self) -> str:
        """Source keyword as matched by the encoder ("EVAL32 ", "STOP")."""
        return f"{self.mnemonic} " if self.takes_operands else self.mnemonic

    def __repr__(self) -> str:
        return f"OpcodeInfo({self.mnemonic!r} -> {self.opcode!r})"


def _op(mnemonic: str, opcode: str) -> tuple[str, OpcodeInfo]:
    return mnemonic, OpcodeInfo(mnemonic, opcode)


def _bare(mnemonic: str, opcode: str) -> tuple[str, OpcodeInfo]:
    return mnemonic, OpcodeInfo(mnemonic, opcode, takes_operands=False)


# =============================================================================
# Opcode Table
# =============================================================================
# Key: mnemonic
# Value: OpcodeInfo(mnemonic, opcode character, takes_operands)
#
# Table order is significant: the encoder applies keywords in this order.
# Upper-case letters are core evaluation/control instructions, lower-case
# letters are chain/transaction queries.
# =============================================================================

OPCODE_TABLE: dict[str, OpcodeInfo] = dict([
    # Evaluation
    _op("EVAL8", "A"),
    _op("EVAL16", "B"),
    _op("EVAL32", "C"),
    _op("EVAL64", "D"),
    _op("EVAL256", "E"),
    _op("CONV", "F"),
    _op("HASH", "G"),
    _op("HASH160", "H"),
    _op("SIGCHECK", "I"),

    # Control flow
    _op("IF", "K"),
    _op("CALL", "L"),
    _op("EXEC", "M"),

    # Storage and memory
    _op("LOAD", "N"),
    _op("STORE", "O"),
    _op("DEL", "P"),
    _op("LIBLOAD", "Q"),
    _op("MALLOC", "R"),
    _op("ALLOC", "S"),
    _op("COPY", "T"),
    _op("COPYIMM", "U"),

    # Termination
    _bare("SELFDESTRUCT", "W"),
    _bare("REVERT", "X"),
    _bare("RETURN", "Y"),

    # Transaction and chain state
    _op("RECEIVED", "a"),
    _op("TXFEE", "b"),
    _op("GETCOIN", "c"),
    _bare("NOP", "d"),
    _op("SPEND", "e"),
    _op("ADDDEF", "f"),
    _op("ADDTXOUT", "g"),
    _op("GETDEFINITION", "h"),
    _op("GETUTXO", "i"),
    _op("MINT", "j"),
    _op("META", "k"),
    _op("TIME", "l"),
    _op("HEIGHT", "m"),
    _bare("TXIOCOUNT", "n"),
    _bare("VERSION", "o"),
    _bare("TOKENCONTRACT", "p"),
    _bare("LOG", "q"),
    _bare("STOP", "z"),
])


MNEMONICS: frozenset[str] = frozenset(OPCODE_TABLE)

OPCODE_CHARS: dict[str, str] = {
    info.opcode: mnemonic for mnemonic, info in OPCODE_TABLE.items()
}


def _keyword_pattern(info: OpcodeInfo) -> re.Pattern:
    pattern = rf"\b{re.escape(info.keyword)}(?= |@|\b)"
    if info.takes_operands:
        # A mnemonic alone on a line has lost its trailing space to trimming
        pattern += rf"|^{re.escape(info.mnemonic)}$"
    return re.compile(pattern, re.ASCII)


_ENCODERS: list[tuple[re.Pattern, str]] = [
    (_keyword_pattern(info), info.opcode) for info in OPCODE_TABLE.values()
]


# =============================================================================
# Lookup Functions
# =============================================================================

def get_opcode(mnemonic: str) -> Optional[OpcodeInfo]:
    """
    Look up the encoding of a mnemonic.

    Args:
        mnemonic: Instruction name, with or without its trailing space

    Returns:
        OpcodeInfo if known, None otherwise
    """
    return OPCODE_TABLE.get(mnemonic.strip().upper())


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Check if a name is a SmallC ASM mnemonic."""
    return mnemonic.strip().upper() in MNEMONICS


def get_supported_opcodes() -> list[str]:
    """
    List the opcode keywords in table order.

    Operand-taking mnemonics keep their trailing space ("EVAL32 "), bare
    ones do not ("RETURN").
    """
    return [info.keyword for info in OPCODE_TABLE.values()]


def encode_opcodes(line: str) -> str:
    """
    Replace every mnemonic keyword in a line by its opcode character.

    Args:
        line: A single intermediate-code statement

    Returns:
        The line with all keywords encoded
    """
    for pattern, opcode in _ENCODERS:
        line = pattern.sub(opcode, line)
    return line
