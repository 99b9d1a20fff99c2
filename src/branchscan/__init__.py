"""BranchScan - parse git branch listings into structured records."""

__version__ = "0.1.0"
