"""
Primitive value types shared by every other part of the SDK.
"""

from .hashes import H160, H256, H512, FixedHash, HashLike
from .uint import U256, U256Like

__all__ = ["FixedHash", "HashLike", "H160", "H256", "H512", "U256", "U256Like"]
