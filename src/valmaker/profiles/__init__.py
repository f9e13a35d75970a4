"""Declarative validator profiles.

Usage:
    from valmaker.profiles import ProfileLoader, load_profile_file

    profile = load_profile_file(Path("profiles/strict.yaml"))
    profile.validate("code", "ab12!")  # "'!' is NOT valid."
"""

from valmaker.profiles.loader import (
    Profile,
    ProfileBuilder,
    ProfileError,
    ProfileLoader,
    build_profile,
    load_profile_file,
)

__all__ = [
    "Profile",
    "ProfileBuilder",
    "ProfileError",
    "ProfileLoader",
    "build_profile",
    "load_profile_file",
]
