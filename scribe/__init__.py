"""Hook event model and terminal browser state for an audit log of Claude Code hook events."""

__version__ = "1.0.0b2"