"""Add files and directories to Xcode project.pbxproj files."""

__version__ = "2.0.0"
__all__ = ["__version__"]