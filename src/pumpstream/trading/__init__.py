"""
Instruction assembly entry point.
"""

from .trade_client import TradeClient

__all__ = ["TradeClient"]
