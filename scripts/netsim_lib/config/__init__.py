"""
netsim_lib.config - Device configuration model and utilities for netsim.

This package contains:
- dataclasses: Configuration data structures (InterfaceConfig, OSPFConfig, etc.)
- validation: IP address, mask and name validation, broadcast arithmetic
- constants: Path constants and device defaults
- store: ConfigurationStore holding the mutable device state
- serialization: JSON save/load of the persisted CliConfig
- render: Jinja2 rendering of the running configuration
"""

from .constants import (
    TEMPLATE_DIR,
    STARTUP_CONFIG_FILE,
    HISTORY_FILE,
)

from .validation import (
    validate_ipv4,
    is_number,
    validate_hostname,
    validate_interface_name,
    parse_ipv4,
    parse_prefix_len,
    prefix_to_netmask,
    calculate_broadcast,
    hash_secret,
    encrypt_type7,
)

from .dataclasses import (
    InterfaceConfig,
    SwitchportConfig,
    StaticRoute,
    AreaConfig,
    OSPFConfig,
    AclEntry,
    AccessControlList,
    VlanConfig,
    PasswordStore,
    NtpAssociation,
    NtpConfig,
    CliConfig,
)

from .store import (
    StoreBusyError,
    ConfigurationStore,
)

from .serialization import (
    to_dict,
    save_config,
    load_config,
)

from .render import (
    render_running_config,
    running_config_lines,
)

__all__ = [
    # Constants
    'TEMPLATE_DIR',
    'STARTUP_CONFIG_FILE',
    'HISTORY_FILE',
    # Validation
    'validate_ipv4',
    'is_number',
    'validate_hostname',
    'validate_interface_name',
    'parse_ipv4',
    'parse_prefix_len',
    'prefix_to_netmask',
    'calculate_broadcast',
    'hash_secret',
    'encrypt_type7',
    # Dataclasses
    'InterfaceConfig',
    'SwitchportConfig',
    'StaticRoute',
    'AreaConfig',
    'OSPFConfig',
    'AclEntry',
    'AccessControlList',
    'VlanConfig',
    'PasswordStore',
    'NtpAssociation',
    'NtpConfig',
    'CliConfig',
    # Store
    'StoreBusyError',
    'ConfigurationStore',
    # Serialization
    'to_dict',
    'save_config',
    'load_config',
    # Rendering
    'render_running_config',
    'running_config_lines',
]
