"""gitprep — choose, build, and run the git diff behind a commit message."""

__version__ = "0.1.0"
