"""fileprobe package: inspect files on local and remote hosts through shell commands.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
