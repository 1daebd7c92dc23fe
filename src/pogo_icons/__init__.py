"""
Normalizes Pokémon GO icon assets into canonical, deterministic file names.
"""

__version__ = "0.1.0"
