"""home-strength: household workout generator and tracker."""

__version__ = "0.1.0"
