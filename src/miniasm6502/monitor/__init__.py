"""
miniasm6502 Monitor
===================

The environment the line assembler runs in:

- **memory**: target memory (MemoryTarget protocol, 64 KB Memory)
- **console**: line input and text output over streams
- **session**: the A/L/Q command loop driving the line assembler

Import the submodules directly, e.g.
``from miniasm6502.monitor.session import MonitorSession``.
"""

__all__ = ["memory", "console", "session"]
