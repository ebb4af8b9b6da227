"""CLI package.

The ``cli`` sub-package contains the Click application, the shell
command table and the session that runs command lines against a
registry.
"""
from __future__ import annotations
