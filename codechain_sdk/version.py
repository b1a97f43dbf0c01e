"""
Version of the codechain_sdk package.
"""

# Bump this when publishing
__version__ = "0.1.0"

__all__ = ["__version__"]
