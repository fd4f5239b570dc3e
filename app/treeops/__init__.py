"""treeops - recursive find, copy and delete of files by extension or name."""

__version__ = "0.1.0"
