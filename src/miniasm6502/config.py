"""
Monitor Configuration
=====================

Settings for a monitor session. Configuration can come from:
- Default values (defined here)
- Environment variables (MonitorConfig.from_env)
- Command-line options (applied on top by the CLI)

Environment variables (all optional):
    MINIASM_START: Start assembling at this address (4 hex digits)
    MINIASM_ROM: Read-only regions, comma separated, e.g. "E000-FFFF,C000-CFFF"
    MINIASM_LIST_COUNT: Instructions shown by the L command
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def parse_hex_address(text: str) -> int:
    """
    Parse a 16-bit address given in hex.

    Accepts an optional ``$`` or ``0x`` prefix, as command-line users expect;
    the monitor prompt itself is stricter.

    Raises:
        ValueError: If the text is not a hex number in $0000-$FFFF
    """
    text = text.strip()
    if text.startswith("$"):
        text = text[1:]
    elif text.lower().startswith("0x"):
        text = text[2:]
    value = int(text, 16)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"address ${value:X} out of range")
    return value


def parse_region(text: str) -> Tuple[int, int]:
    """
    Parse an inclusive address range such as ``"E000-FFFF"``.

    Raises:
        ValueError: If the range is malformed or empty
    """
    start_text, sep, end_text = text.partition("-")
    if not sep:
        raise ValueError(f"region '{text}' must be START-END")
    start = parse_hex_address(start_text)
    end = parse_hex_address(end_text)
    if end < start:
        raise ValueError(f"region '{text}' ends before it starts")
    return (start, end)


@dataclass
class MonitorConfig:
    """
    Configuration for a monitor session.

    Attributes:
        start_address: Begin assembling here right away (None: wait for "A XXXX")
        rom_regions: Read-only address ranges, inclusive
        list_count: Instructions listed by the L command
        escape_char: Character that acts as the Escape key
    """

    start_address: Optional[int] = None
    rom_regions: List[Tuple[int, int]] = field(default_factory=list)
    list_count: int = 20
    escape_char: str = "\x1b"

    @classmethod
    def from_env(cls) -> "MonitorConfig":
        """
        Create MonitorConfig from environment variables.

        Malformed values are logged and ignored.

        Returns:
            MonitorConfig with values from environment variables
        """
        config = cls()

        if start := os.environ.get("MINIASM_START"):
            try:
                config.start_address = parse_hex_address(start)
            except ValueError:
                logger.warning(f"Ignoring invalid MINIASM_START={start!r}")

        if rom := os.environ.get("MINIASM_ROM"):
            for item in rom.split(","):
                try:
                    config.rom_regions.append(parse_region(item.strip()))
                except ValueError:
                    logger.warning(f"Ignoring invalid MINIASM_ROM region {item!r}")

        if count := os.environ.get("MINIASM_LIST_COUNT"):
            try:
                config.list_count = int(count)
            except ValueError:
                logger.warning(f"Ignoring invalid MINIASM_LIST_COUNT={count!r}")

        return config
