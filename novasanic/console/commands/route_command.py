"""
Route List Command
Display all registered routes in a table
"""
from novasanic.console.command import Command


class RouteListCommand(Command):
    """List all registered routes"""

    name = "route:list"
    description = "List all registered routes"

    async def handle(self, **kwargs):
        """List all routes"""
        self.info("🔍 Loading application and routes...")
        self.line()

        app = self.create_app()
        app_routes = app.make('router').routes.to_dict()

        if not app_routes['total']:
            self.error("No routes registered")
            return 1

        # Registration order is match order, so no sorting
        rows = []
        for route in app_routes['routes']:
            rows.append([
                '|'.join(route['methods']),
                route['uri'],
                route['action'],
                route['type'],
            ])

        self.table(['Method', 'URI', 'Action', 'Type'], rows, max_widths=[50, 50, 40, 10])
        self.line()
        self.success(f"Showing {app_routes['total']} routes")
        return 0
