"""Read an org-table declaration of dotfiles, check it, and symlink each entry into place."""

__version__ = "0.1.0"
__all__ = ["__version__"]