"""
Version information for the smart home discovery skill bridge.
This file follows semantic versioning (MAJOR.MINOR.PATCH):
- MAJOR version for incompatible API changes
- MINOR version for backwards-compatible functionality
- PATCH version for backwards-compatible bug fixes
"""

__version__ = "1.0.0"
__version_info__ = tuple(map(int, __version__.split('.')))
