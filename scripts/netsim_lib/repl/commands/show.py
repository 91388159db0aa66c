"""
Show commands for REPL.

Read-only views of the session and the configuration store.
"""

from prompt_toolkit.history import FileHistory

from netsim_lib.config import render_running_config

from ..command import CommandError, require_no_arguments
from ..context import CliContext, Clock
from ..display import (
    show_interfaces,
    show_ip_interface_brief,
    show_routes,
    show_ospf,
    show_access_lists,
    show_vlans,
    show_ntp,
    show_ntp_associations,
)


def format_uptime(seconds: int) -> str:
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if days:
        parts.append(f"{days} day{'s' if days != 1 else ''}")
    parts.append(f"{hours} hour{'s' if hours != 1 else ''}")
    parts.append(f"{minutes} minute{'s' if minutes != 1 else ''}")
    parts.append(f"{seconds} second{'s' if seconds != 1 else ''}")
    return ", ".join(parts)


def cmd_show_running_config(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show running-config", args)
    text = render_running_config(ctx)
    print("Building configuration...")
    print()
    print(f"Current configuration : {len(text.encode())} bytes")
    print(text, end="")


def cmd_show_startup_config(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show startup-config", args)
    if not ctx.config.startup_config:
        print("startup-config is not present")
        return
    print(f"Startup configuration (last saved: {ctx.config.last_written})")
    print()
    for line in ctx.config.startup_config:
        print(line)


def cmd_show_version(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show version", args)
    print(ctx.version)
    print(f"{ctx.config.hostname} uptime is {format_uptime(clock.uptime_seconds())}")


def cmd_show_clock(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show clock", args)
    print(f"{clock.time} UTC {clock.date}")


def cmd_show_uptime(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show uptime", args)
    print(f"System uptime: {format_uptime(clock.uptime_seconds())}")


def cmd_show_interfaces(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """show interfaces [<name>]"""
    switchports = ctx.store.switchport_all()
    if not args:
        show_interfaces(ctx.store.interface_all(), switchports)
        return
    name = "".join(args)
    iface = ctx.store.interface_get(name)
    if iface is None:
        raise CommandError(f"Interface {name} not found")
    show_interfaces([iface], switchports)


def cmd_show_ip_interface_brief(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show ip interface brief", args)
    show_ip_interface_brief(ctx.store.interface_all())


def cmd_show_ip_route(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show ip route", args)
    show_routes(ctx.store.route_all(), ctx.store.interface_all())


def cmd_show_ip_ospf(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show ip ospf", args)
    show_ospf(ctx.store.ospf_snapshot())


def cmd_show_access_lists(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """show access-lists [<id>]"""
    if not args:
        show_access_lists(ctx.store.acl_all())
        return
    acl = ctx.store.acl_get(args[0])
    if acl is None:
        raise CommandError(f"Access list {args[0]} does not exist")
    show_access_lists([acl])


def cmd_show_vlan(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show vlan", args)
    show_vlans(ctx.store.vlan_all(), ctx.store.switchport_all())


def cmd_show_ntp(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show ntp", args)
    show_ntp(ctx.store.ntp_snapshot())


def cmd_show_ntp_associations(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show ntp associations", args)
    show_ntp_associations(ctx.store.ntp_snapshot())


def cmd_show_history(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """Commands entered in this and earlier sessions, oldest first."""
    require_no_arguments("show history", args)
    if ctx.history_file is None or not ctx.history_file.exists():
        raise CommandError("No command history is recorded for this session")
    # FileHistory yields the most recent entry first
    for line in reversed(list(FileHistory(str(ctx.history_file)).load_history_strings())):
        print(f"  {line}")


def cmd_show_login(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show login", args)
    print("A default login delay of 1 seconds is applied.")
    print("No Quiet-Mode access list has been configured.")
    print()
    print(f"{ctx.config.hostname} NOT enabled to watch for login Attacks")


def cmd_show_sessions(args: list[str], ctx: CliContext, clock: Clock) -> None:
    require_no_arguments("show sessions", args)
    print("% No connections open")


CONTROLLER_TYPES = ("GigabitEthernet", "FastEthernet", "Ethernet", "Serial")


def cmd_show_controllers(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """show controllers <interface-type> [<interface-number>]"""
    if not args or len(args) > 2:
        raise CommandError("Usage: show controllers <interface-type> <interface-number>")
    interface_type = args[0]
    if interface_type not in CONTROLLER_TYPES:
        raise CommandError(f"Invalid interface type. Valid types are: {', '.join(CONTROLLER_TYPES)}")
    number = args[1] if len(args) == 2 else "0/0"
    print(f"Interface {interface_type}{number}")
    print("Hardware is PQUICC MPC860P ADDR: 80C95180, FASTSEND: 80011BA4")
    print("DIST ROUTE ENABLED: 0")
    print("Route Cache Flag: 0")


PROCESSES = """\
CPU utilization for five seconds: 0%/0%; one minute: 0%; five minutes: 0%
 PID Q  Ty       PC  Runtime(uS)    Invoked   uSecs    Stacks TTY Process
   1 C  sp 602F3AF0            0       1627       0 2600/3000   0 Load Meter
   2 L  we 60C5BE00            4        136      29 5572/6000   0 CEF Scanner
   3 L  st 602D90F8         1676        837    2002 5740/6000   0 Check heaps
   4 C  we 602D08F8            0          1       0 5568/6000   0 Chunk Manager
   5 C  we 602DF0E8            0          1       0 5592/6000   0 Pool Manager"""

PROCESSES_CPU = """\
CPU utilization for five seconds: 8%/4%; one minute: 6%; five minutes: 5%
 PID Runtime(uS)   Invoked  uSecs    5Sec   1Min   5Min TTY Process
   1         384     32789     11   0.00%  0.00%  0.00%   0 Load Meter
   2        2752      1179   2334   0.73%  1.06%  0.29%   0 Exec
   3      318592      5273  60419   0.00%  0.15%  0.17%   0 Check heaps
   4           4         1   4000   0.00%  0.00%  0.00%   0 Pool Manager
   5        6472      6568    985   0.00%  0.00%  0.00%   0 ARP Input"""

PROCESSES_CPU_HISTORY = """\
CPU% per minute (last 60 minutes)
100
 90
 80         *  *                     * *     *  * *  *
 70  * * ***** *  ** ***** ***  **** ******  *  *******     * *
 60  #***##*##*#***#####*#*###*****#*###*#*#*##*#*##*#*##*****#
 50  ##########################################################
 40  ##########################################################
 30  ##########################################################
 20  ##########################################################
 10  ##########################################################
    0....5....1....1....2....2....3....3....4....4....5....5....
              0    5    0    5    0    5    0    5    0    5"""

PROCESSES_MEMORY = """\
Total: 106206400, Used: 7479116, Free: 98727284
 PID TTY  Allocated      Freed    Holding    Getbufs    Retbufs Process
   0   0      81648       1808    6577644          0          0 *Init*
   0   0        572     123196        572          0          0 *Sched*
   0   0   10750692    3442000       5812    2813524          0 *Dead*
   1   0        276        276       3804          0          0 Load Meter"""


def cmd_show_processes(args: list[str], ctx: CliContext, clock: Clock) -> None:
    """show processes [cpu [history] | memory]"""
    views = {
        (): PROCESSES,
        ("cpu",): PROCESSES_CPU,
        ("cpu", "history"): PROCESSES_CPU_HISTORY,
        ("memory",): PROCESSES_MEMORY,
    }
    text = views.get(tuple(args))
    if text is None:
        raise CommandError(
            "Invalid subcommand for 'show processes'. Valid subcommands are 'cpu', 'cpu history' and 'memory'."
        )
    print(text)
