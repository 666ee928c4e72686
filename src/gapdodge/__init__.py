"""
gapdodge: a small pygame arcade game about dodging scrolling gaps.
"""

__version__ = "0.1.0"
