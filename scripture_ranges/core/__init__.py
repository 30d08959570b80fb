"""
Core domain models, range algebra and record contracts.

This module contains the foundational building blocks that are independent
of any concrete book catalog (static tables, databases, etc.).
"""
