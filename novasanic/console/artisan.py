"""
Artisan - Laravel-style CLI

    python -m novasanic.console.artisan route:list
"""
import asyncio
import inspect
import sys

from novasanic.console.command import Command
from novasanic.support import ClassLoader, Storage


class Artisan:
    def __init__(self):
        # Paths to scan for commands
        self.command_paths = [
            Storage.framework('console', 'commands'),  # Framework built-in commands
            Storage.app('console'),  # User's application commands
        ]
        self.commands = {}
        self._discover_commands()

    def _discover_commands(self):
        """Auto-discover commands"""
        for command_path in self.command_paths:
            if not command_path.exists():
                continue

            for py_file in sorted(command_path.glob('*.py')):
                if py_file.name.startswith('__'):
                    continue

                module = ClassLoader.load_module(py_file, f"artisan_commands.{py_file.stem}")

                for _, obj in inspect.getmembers(module, inspect.isclass):
                    if issubclass(obj, Command) and obj is not Command and obj.name:
                        self.commands[obj.name] = obj()

    def show_help(self):
        """Show available commands"""
        print("Artisan - Laravel-style CLI")
        print()

        if not self.commands:
            print("No commands available.")
            return

        categories = {}
        for name, cmd in self.commands.items():
            category = name.split(':')[0] if ':' in name else 'general'
            categories.setdefault(category, []).append(cmd)

        for category in sorted(categories.keys()):
            print(f"{category.upper()}:")
            for cmd in sorted(categories[category], key=lambda c: c.name):
                print(f"  {cmd.signature:<35} {cmd.description}")
            print()

    async def run(self, argv):
        """Run the CLI application"""
        if len(argv) < 2 or argv[1] in ['help', '--help', '-h']:
            self.show_help()
            return 0

        command_name = argv[1]

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        exit_code = await self.commands[command_name].handle(**self._parse_args(argv[2:]))
        return exit_code if exit_code is not None else 0

    @staticmethod
    def _parse_args(args):
        """Parse --key=value and --flag options"""
        kwargs = {}
        for arg in args:
            if not arg.startswith('--'):
                continue
            key, _, value = arg[2:].partition('=')
            kwargs[key.replace('-', '_')] = value if value else True
        return kwargs


def main(argv=None):
    argv = argv if argv is not None else sys.argv
    return asyncio.run(Artisan().run(argv))


if __name__ == '__main__':
    sys.exit(main())
