"""
SmallC ASM Configuration
========================

Tool configuration: verbosity, logging, formatter indentation, artifact
file suffixes and the source encoding. Configuration can come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Command-line options, which override both

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
import codecs
import logging
import os


logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass
class AssemblerConfig:
    """
    Configuration for the SmallC ASM tools.

    Attributes:
        verbose: Log progress and debug detail (default: False)
        log_level: Level used when not verbose (default: "WARNING")
        indent: Formatter indentation for instructions (default: two spaces)
        bytecode_suffix: Suffix of the hex bytecode artifact (default: ".hex")
        hash_suffix: Suffix of the hash artifact (default: ".hash")
        object_suffix: Suffix of the object code artifact (default: ".obj")
        debug_suffix: Suffix of the debug info artifact (default: ".dbg.json")
        encoding: Source file encoding (default: "utf-8")
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # DIAGNOSTICS
    # ═══════════════════════════════════════════════════════════════════════════

    verbose: bool = False
    log_level: str = "WARNING"

    # ═══════════════════════════════════════════════════════════════════════════
    # FORMATTING
    # ═══════════════════════════════════════════════════════════════════════════

    indent: str = "  "

    # ═══════════════════════════════════════════════════════════════════════════
    # ARTIFACTS
    # ═══════════════════════════════════════════════════════════════════════════

    bytecode_suffix: str = ".hex"
    hash_suffix: str = ".hash"
    object_suffix: str = ".obj"
    debug_suffix: str = ".dbg.json"
    encoding: str = "utf-8"

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            SMALLC_ASM_VERBOSE: Verbose output (1/0, true/false, yes/no)
            SMALLC_ASM_LOG_LEVEL: Logging level name (e.g. "INFO")
            SMALLC_ASM_INDENT: Formatter indent width in spaces
            SMALLC_ASM_ENCODING: Source file encoding

        Invalid values are reported and the default is kept.

        Returns:
            AssemblerConfig with values from environment variables
        """
        config = cls()

        if verbose := os.environ.get("SMALLC_ASM_VERBOSE"):
            value = verbose.strip().lower()
            if value in _TRUE_VALUES:
                config.verbose = True
            elif value not in _FALSE_VALUES:
                logger.warning(f"Invalid SMALLC_ASM_VERBOSE: {verbose}")

        if level := os.environ.get("SMALLC_ASM_LOG_LEVEL"):
            if level.upper() in _LOG_LEVELS:
                config.log_level = level.upper()
            else:
                logger.warning(f"Invalid SMALLC_ASM_LOG_LEVEL: {level}")

        if indent := os.environ.get("SMALLC_ASM_INDENT"):
            try:
                width = int(indent)
                if width < 0:
                    raise ValueError(indent)
                config.indent = " " * width
            except ValueError:
                logger.warning(f"Invalid SMALLC_ASM_INDENT: {indent}")

        if encoding := os.environ.get("SMALLC_ASM_ENCODING"):
            try:
                codecs.lookup(encoding)
                config.encoding = encoding
            except LookupError:
                logger.warning(f"Invalid SMALLC_ASM_ENCODING: {encoding}")

        return config

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else getattr(logging, self.log_level)
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )
