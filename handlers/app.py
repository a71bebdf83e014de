"""
handlers/app.py
---------------
Console command loop. Reads commands until `exit` (or end of input).
"""

from typing import Callable

from handlers.command import Command
from handlers.wise_saying_controller import WiseSayingController
from utils.logger import get_logger

logger = get_logger(__name__)


class App:
    """Dispatches console commands to the controller."""

    def __init__(self, controller: WiseSayingController,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input = input_fn
        self.output = output_fn
        self.routes = {
            "register": controller.register,
            "list": controller.list,
            "delete": controller.delete,
            "modify": controller.modify,
            "build": controller.build,
        }

    def run(self) -> None:
        self.output("== Wise Saying App ==")
        while True:
            try:
                raw = self.input("Command) ")
            except EOFError:
                break

            command = Command(raw)
            if command.action == "exit":
                break
            if not command.action:
                continue

            handler = self.routes.get(command.action)
            if handler is None:
                self.output(f"Unknown command: {command.action}")
                continue
            handler(command)
        logger.info("Wise Saying App stopped.")
