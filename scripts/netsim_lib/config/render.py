"""
Running-config rendering for netsim.

Builds the Cisco-style running configuration from the session context and
the configuration store using the Jinja2 template in netsim_lib/templates.
"""

import ipaddress
import re
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader

from .constants import TEMPLATE_DIR
from .dataclasses import AclEntry
from .validation import encrypt_type7

if TYPE_CHECKING:
    from ..repl.context import CliContext


RUNNING_CONFIG_TEMPLATE = "running-config.j2"


def wildcard_mask(prefix_len: int) -> str:
    """Convert a prefix length to a dotted wildcard mask."""
    return str(ipaddress.IPv4Network(f"0.0.0.0/{prefix_len}").hostmask)


def acl_rule(entry: AclEntry) -> str:
    """Format the part of an ACL line after the permit/deny keyword."""
    parts = []
    if entry.protocol:
        parts.append(entry.protocol)
    parts.append(entry.source)
    if entry.source_operator:
        parts.extend([entry.source_operator, entry.source_port])
    if entry.protocol:
        parts.append(entry.destination)
        if entry.destination_operator:
            parts.extend([entry.destination_operator, entry.destination_port])
    return " ".join(parts)


def short_version(version: str) -> str:
    """Extract the '15.1' part from a full IOS version banner."""
    match = re.search(r'Version (\d+\.\d+)', version)
    return match.group(1) if match else version


def create_environment(template_dir: Path = TEMPLATE_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True
    )
    env.filters['type7'] = encrypt_type7
    env.filters['wildcard'] = wildcard_mask
    env.filters['acl_rule'] = acl_rule
    return env


def render_running_config(ctx: "CliContext", template_dir: Path = TEMPLATE_DIR) -> str:
    """Render the running configuration as text."""
    store = ctx.store
    env = create_environment(template_dir)
    template = env.get_template(RUNNING_CONFIG_TEMPLATE)

    context = {
        'hostname': ctx.config.hostname,
        'version_short': short_version(ctx.version),
        'password_encryption': ctx.config.password_encryption,
        'passwords': store.passwords(),
        'vlans': store.vlan_all(),
        'interfaces': store.interface_all(),
        'switchports': store.switchport_all(),
        'ospf': store.ospf_snapshot(),
        'routes': store.route_all(),
        'acls': store.acl_all(),
        'ntp': store.ntp_snapshot(),
    }
    return template.render(**context)


def running_config_lines(ctx: "CliContext") -> list[str]:
    """Rendered running configuration split into lines."""
    return render_running_config(ctx).splitlines()
