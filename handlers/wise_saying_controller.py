"""
handlers/wise_saying_controller.py
----------------------------------
Handles each console action of the wise saying app.
"""

from typing import Callable

from handlers.command import Command
from services.wise_saying_service import WiseSayingService


class WiseSayingController:
    """
    Console front for WiseSayingService.

    Args:
        service: The service to call.
        build_path: Where the `build` command writes its JSON file.
        input_fn: Reads one line from the user (prompt -> text).
        output_fn: Prints one line to the user.
    """

    def __init__(self, service: WiseSayingService, build_path: str,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.service = service
        self.build_path = build_path
        self.input = input_fn
        self.output = output_fn

    def register(self, command: Command) -> None:
        content = self.input("Wise saying : ").strip()
        author = self.input("Author : ").strip()
        wise_saying = self.service.write(content, author)
        self.output(f"Wise saying #{wise_saying.id} registered.")

    def list(self, command: Command) -> None:
        keyword_type = command.get_param("keywordType")
        keyword = command.get_param("keyword")

        if keyword_type and keyword is not None:
            try:
                items = self.service.search(keyword_type, keyword)
            except ValueError as e:
                self.output(str(e))
                return
            self.output("----------------------")
            self.output(f"Search type : {keyword_type}")
            self.output(f"Search keyword : {keyword}")
        else:
            items = self.service.get_all()

        self.output("----------------------")
        self.output("No / Author / Wise saying")
        self.output("----------------------")
        for wise_saying in items:
            self.output(str(wise_saying))

    def delete(self, command: Command) -> None:
        id = command.get_param_as_int("id")
        if id <= 0:
            self.output("Please enter a valid id, e.g. delete?id=1")
            return

        if self.service.delete(id):
            self.output(f"Wise saying #{id} deleted.")
        else:
            self.output(f"Wise saying #{id} does not exist.")

    def modify(self, command: Command) -> None:
        id = command.get_param_as_int("id")
        if id <= 0:
            self.output("Please enter a valid id, e.g. modify?id=1")
            return

        wise_saying = self.service.get_by_id(id)
        if wise_saying is None:
            self.output(f"Wise saying #{id} does not exist.")
            return

        self.output(f"Wise saying (current) : {wise_saying.content}")
        content = self.input("Wise saying : ").strip()
        self.output(f"Author (current) : {wise_saying.author}")
        author = self.input("Author : ").strip()

        self.service.modify(wise_saying, content, author)
        self.output(f"Wise saying #{id} modified.")

    def build(self, command: Command) -> None:
        count = self.service.build(self.build_path)
        self.output(f"{self.build_path} updated ({count} item(s)).")
