# SPDX-License-Identifier: MIT
"""Command line front-end for autoctl_version."""

__version__ = "0.1.0"
