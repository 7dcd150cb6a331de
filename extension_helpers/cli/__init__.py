"""Command-line interface for `extension_helpers`."""
