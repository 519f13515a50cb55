"""Generate minimal CMake-based C and C++ project skeletons."""

__version__ = "0.1.0"
