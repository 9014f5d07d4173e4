# apps/immune/console.py
"""
Console driving adapter

Line-oriented loop that reads antigen values and prints antibodies.
"""
import logging

from apps.domain.models import Antigen, InvalidAntigenError

logger = logging.getLogger(__name__)

PROMPT = "\nEnter antigen value ({low} to {high}) or '0' to exit: "
EXIT_VALUE = 0


class ConsoleSession:
    """
    Interactive session bound to one ImmuneService

    The service and both streams are passed in; the session holds no
    global state.
    """

    def __init__(self, service, stdin, stdout):
        self._service = service
        self._stdin = stdin
        self._stdout = stdout

    def _write(self, text: str):
        self._stdout.write(text)
        self._stdout.flush()

    def prompt(self) -> str:
        return PROMPT.format(low=1, high=self._service.max_value - 1)

    def run(self) -> int:
        """
        Run until '0' or end of input

        Returns:
            Number of antibodies printed
        """
        printed = 0

        while True:
            self._write(self.prompt())
            line = self._stdin.readline()

            if not line:
                self._write("\n")
                break

            try:
                value = int(line.strip())
            except ValueError:
                self._write("Antigen value must be an integer\n")
                continue

            if value == EXIT_VALUE:
                break

            try:
                antibody = self._service.respond(Antigen(value))
            except InvalidAntigenError as e:
                shown = "missing" if e.value is None else e.value
                self._write(f"Invalid antigen value: {shown}\n")
                continue

            self._write(f"{antibody}\n")
            printed += 1

        logger.info(f"Console session ended after {printed} antibodies")
        return printed
