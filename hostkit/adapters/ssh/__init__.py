"""
SSH transport adapter
"""
from .params import connect_kwargs

__all__ = ["connect_kwargs"]
