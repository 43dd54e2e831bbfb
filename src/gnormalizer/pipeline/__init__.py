"""
Pipeline orchestration package.

Pipeline stages read from and write to the filesystem. They are not
imported at package level so that importing the parser never pulls in
file-handling code paths; import each stage from its module.
"""


__all__ = []
