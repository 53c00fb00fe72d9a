"""
Base Command Class
Laravel-style command base class for Artisan CLI
"""
from abc import ABC, abstractmethod
from typing import Optional


class Command(ABC):

    # Command name (e.g., "route:list")
    name: str = ""

    # Command description
    description: str = ""

    # Command signature (for help display)
    signature: Optional[str] = None

    def __init__(self):
        if not self.signature:
            self.signature = self.name

    @abstractmethod
    async def handle(self, *args, **kwargs):
        """
        Execute the command logic

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        pass

    def create_app(self):
        """Build and boot the application rooted at the working directory"""
        import os
        from novasanic.application import Application

        app = Application(os.getcwd())
        app.boot()
        return app

    # Output helpers
    def info(self, message: str):
        """Print info message"""
        print(f"ℹ {message}")

    def success(self, message: str):
        """Print success message"""
        print(f"✅ {message}")

    def error(self, message: str):
        """Print error message"""
        print(f"❌ {message}")

    def line(self, message: str = ""):
        """Print plain line"""
        print(message)

    def table(self, headers: list, rows: list, max_widths: Optional[list] = None):
        """Print a bordered table, truncating cells to max_widths"""
        from novasanic.support import Str

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(str(cell)))

        if max_widths:
            widths = [min(w, m) for w, m in zip(widths, max_widths)]

        separator = '+-' + '-+-'.join('-' * w for w in widths) + '-+'

        self.line(separator)
        self.line('| ' + ' | '.join(h.ljust(widths[i]) for i, h in enumerate(headers)) + ' |')
        self.line(separator)

        for row in rows:
            cells = []
            for i, cell in enumerate(row):
                text = str(cell)
                if len(text) > widths[i]:
                    text = Str.limit(text, widths[i] - 3)
                cells.append(text.ljust(widths[i]))
            self.line('| ' + ' | '.join(cells) + ' |')

        self.line(separator)
