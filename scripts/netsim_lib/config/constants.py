"""
Configuration constants for netsim.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# Template and configuration paths
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
STARTUP_CONFIG_FILE = Path("startup-config.json")
HISTORY_FILE = Path.home() / ".netsim_history"

# Device defaults
DEFAULT_HOSTNAME = "Router"
DEFAULT_VERSION = "Cisco IOS Software, C2900 Software (C2900-UNIVERSALK9-M), Version 15.1(4)M4, RELEASE SOFTWARE (fc2)"
DEFAULT_IFCONFIG_INTERFACE = "ens33"
DEFAULT_IFCONFIG_ADDRESS = "192.168.253.135"
DEFAULT_IFCONFIG_PREFIX = 24
DEFAULT_VLAN_ID = 1
DEFAULT_VLAN_NAME = "default"

# Store locking
STORE_LOCK_TIMEOUT = 2.0  # seconds

# Value ranges
VLAN_ID_MIN = 1
VLAN_ID_MAX = 4094
CLOCK_YEAR_MIN = 1993
CLOCK_YEAR_MAX = 2035
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
