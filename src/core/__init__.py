"""
Core number-to-words transformation and its JSON contracts.

This module contains the foundational building blocks that are independent
of any outer surface (CLI, network, storage).
"""
