"""
ConfigCommand — Show or change configuration
"""

from ..commands.base import BaseCommand


class ConfigCommand(BaseCommand):
    """Command for configuration display and modification."""

    def show_config(self) -> int:
        print(self.config_manager.display())
        return 0

    def set_config(self, key: str, value: str, scope: str = "project") -> int:
        error = self.config_manager.set(key, value, scope=scope)
        if error:
            print(f"{self.symbols.check_fail} {error}")
            return 1
        print(f"{self.symbols.check_pass} Set {key} = {value} ({scope})")
        return 0


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='Show or set configuration')
    p.add_argument('--set', nargs=2, metavar=('KEY', 'VALUE'),
                   help='Set a value, e.g. --set display.format json')
    p.add_argument('--user', action='store_true', help='Write to user config instead of project')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if args.set:
        key, value = args.set
        return cli._config_cmd.set_config(key, value, scope="user" if args.user else "project")
    return cli._config_cmd.show_config()
