"""
netsim_lib.profiles - Device profile loader for netsim.

This package contains:
- dataclasses: Device profile data structures and the built-in default
- validation: Profile validation
- loader: YAML parsing and profile loading functions
"""

from .dataclasses import (
    ProfileInterface,
    ProfileVlan,
    DeviceProfile,
    default_profile,
)

from .validation import (
    ProfileValidationError,
    validate_device_profile,
)

from .loader import (
    parse_device_profile,
    load_device_profile,
)

__all__ = [
    # Dataclasses
    'ProfileInterface',
    'ProfileVlan',
    'DeviceProfile',
    'default_profile',
    # Validation
    'ProfileValidationError',
    'validate_device_profile',
    # Loader
    'parse_device_profile',
    'load_device_profile',
]
