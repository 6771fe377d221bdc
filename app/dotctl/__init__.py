"""dotctl - Dotfiles bootstrap and symlink reconciler.

Installs packages and shell tooling, then links the dotfiles repository
into the user's home directory.
"""

__version__ = "0.1.0"
