"""
panelkit - load and validate overview page panels and steps.
"""

__version__ = "0.1.0"
