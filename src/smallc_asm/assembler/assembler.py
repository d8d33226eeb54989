"""
SmallC ASM Assembler - Main Interface
=====================================

This module provides the Assembler class, the single entry point that runs
both passes and packages the outcome in an AssemblyResult.

Example Usage
-------------
>>> from smallc_asm.assembler import Assembler
>>>
>>> result = Assembler().assemble('''
... define BODY .
... MALLOC 0,100,
... EVAL32 gi0,42,
... STOP
... ''')
>>> result.success
True
>>> result.object_code
'R0,100,\\nCgi0,42,\\nz'

Failure Semantics
-----------------
assemble() never raises. Any error during either pass yields a result
with success=False, an error message and all other fields empty.
assemble_or_raise() is the raising variant.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import logging

from smallc_asm.assembler.bytecode import content_hash, encode_bytecode
from smallc_asm.assembler.codegen import CodeGenerator
from smallc_asm.assembler.debuginfo import DebugRecord
from smallc_asm.assembler.parser import FirstPass
from smallc_asm.errors import SmallCAsmError


logger = logging.getLogger(__name__)


# =============================================================================
# Assembly Result
# =============================================================================

@dataclass
class AssemblyResult:
    """
    Outcome of one assembly.

    Either all of bytecode/hash/object_code/debug_info are populated
    (success=True) or only error is (success=False).

    Attributes:
        success: True if assembly completed
        bytecode: Hex encoding of the object code bytes
        hash: RIPEMD-160 of the object code bytes, lowercase hex
        object_code: Final object code text
        debug_info: Debug records in source order
        error: Error message when success is False
    """
    success: bool
    bytecode: str = ""
    hash: str = ""
    object_code: str = ""
    debug_info: list[DebugRecord] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "AssemblyResult":
        return cls(success=False, error=message)

    def to_dict(self) -> dict[str, Any]:
        """Render the result with the camelCase keys used by consumers."""
        result: dict[str, Any] = {
            "bytecode": self.bytecode,
            "hash": self.hash,
            "objectCode": self.object_code,
            "debugInfo": [record.to_dict() for record in self.debug_info],
            "success": self.success,
        }
        if self.error is not None:
            result["error"] = self.error
        return result


# =============================================================================
# Assembler
# =============================================================================

class Assembler:
    """
    SmallC ASM assembler.

    An Assembler holds no state between calls other than its options, so
    one instance can assemble any number of sources.

    Attributes:
        verbose: If True, log a summary of each assembly at INFO level
        encoding: Text encoding used by assemble_file()
    """

    def __init__(self, verbose: bool = False, encoding: str = "utf-8"):
        self.verbose = verbose
        self.encoding = encoding

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_or_raise(self, source: str, filename: str = "<input>") -> AssemblyResult:
        """
        Assemble source text, raising on failure.

        Raises:
            SmallCAsmError: If assembly fails
        """
        first_pass = FirstPass(filename).run(source)
        object_code = CodeGenerator(first_pass.symbols).generate(first_pass.statements)

        bytecode = encode_bytecode(object_code)
        digest = content_hash(bytecode)

        message = (
            f"Assembled {filename}: {len(first_pass.statements)} statements, "
            f"{len(bytecode) // 2} bytes, hash {digest}"
        )
        if self.verbose:
            logger.info(message)
        else:
            logger.debug(message)

        return AssemblyResult(
            success=True,
            bytecode=bytecode,
            hash=digest,
            object_code=object_code,
            debug_info=first_pass.debug_info,
        )

    def assemble(self, source: str, filename: str = "<input>") -> AssemblyResult:
        """
        Assemble source text.

        Args:
            source: SmallC ASM source
            filename: Name used in error locations

        Returns:
            AssemblyResult; never raises
        """
        try:
            return self.assemble_or_raise(source, filename)
        except SmallCAsmError as e:
            logger.debug(f"Assembly of {filename} failed: {e}")
            return AssemblyResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Internal error while assembling {filename}")
            return AssemblyResult.failure(f"internal error: {e}")

    def assemble_file(self, filepath: str | Path) -> AssemblyResult:
        """
        Assemble a source file.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        filepath = Path(filepath)
        source = filepath.read_text(encoding=self.encoding)
        return self.assemble(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> AssemblyResult:
    """Assemble source text with a default Assembler."""
    return Assembler().assemble(source, filename)


def assemble_file(filepath: str | Path) -> AssemblyResult:
    """Assemble a source file with a default Assembler."""
    return Assembler().assemble_file(filepath)
