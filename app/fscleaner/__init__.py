"""fscleaner - Remove directory trees older than a given age.

Walks the immediate children of a root directory and removes every
file below the children whose modification time is older than the
requested age, with a dry-run mode that only reports.
"""

__version__ = "0.1.0"
