"""
Controller List Command
Display the controllers reachable through auto-dispatch
"""
from novasanic.console.command import Command


class ControllerListCommand(Command):
    """List all auto-dispatchable controllers"""

    name = "controller:list"
    description = "List controllers found under the app directory"

    async def handle(self, **kwargs):
        app = self.create_app()
        registry = app.make('controller_registry')

        if not len(registry):
            self.error("No controllers found")
            return 1

        rows = []
        for qualified, controller in sorted(registry.all().items()):
            methods = [
                name for name in vars(controller)
                if not name.startswith('_') and callable(getattr(controller, name))
            ]
            rows.append([qualified, ', '.join(methods) or '-'])

        self.table(['Controller', 'Methods'], rows, max_widths=[60, 60])
        self.line()
        self.success(f"Showing {len(registry)} controllers")
        return 0
