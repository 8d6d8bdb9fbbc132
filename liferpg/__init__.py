"""LifeRPG Progression Core"""
__version__ = "0.1.0"
