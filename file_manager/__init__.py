"""file_manager package: interactive, stateful file manager shell.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
