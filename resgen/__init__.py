"""Icon and splash screen generator for Cordova style mobile projects."""

__version__ = "1.0.0"
