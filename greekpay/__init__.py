"""
GreekPay payments core.
"""

__version__ = "1.0.0"
