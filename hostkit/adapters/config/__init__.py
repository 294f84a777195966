"""
Host inventory configuration
"""
from .loader import ConfigLoader, distinct_hosts

__all__ = ["ConfigLoader", "distinct_hosts"]
