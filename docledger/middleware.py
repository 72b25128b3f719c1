"""Project middleware."""

import atexit

from .container import build_services


class ServicesMiddleware:
    """Build the service container once and attach it to every request.

    Django instantiates middleware once per handler, so the container lives
    for the life of the process; shutdown runs at interpreter exit.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.services = build_services().start()
        atexit.register(self.services.shutdown)

    def __call__(self, request):
        request.services = self.services
        return self.get_response(request)
