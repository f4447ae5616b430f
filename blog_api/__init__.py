"""
REST gateway over the usuarios, publicaciones and comentarios tables.
"""

__version__ = "0.1.0"
