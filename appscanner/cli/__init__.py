"""appscanner command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``appscanner`` script).
"""

from appscanner.cli.main import cli

__all__ = ["cli"]
