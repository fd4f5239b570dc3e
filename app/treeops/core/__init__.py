"""Core configuration and path handling for treeops."""
