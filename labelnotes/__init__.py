"""labelnotes - label-based release notes from GitHub pull requests."""

__version__ = "0.1.0"
