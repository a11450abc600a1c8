import logging
import sys
from inspect import getdoc, isclass

from docopt import docopt, DocoptExit

from .error import CommandError, CommandNotFoundError, ArgumentError

log = logging.getLogger(__name__)


class Dispatcher:
    """Dispatcher runs a command whose doc-string is its docopt usage.

    A class is a command group: it is constructed with the parsed options
    and the `<command>` argument names the method that handles `<args>`.
    Any other callable is a leaf command and gets the parsed options.
    """

    def __init__(
        self, command, posarg_name="<command>", restarg_name="<args>", out=None
    ):
        self.root = command
        self.version = getattr(command, "__version__", None)
        self.out = out or sys.stdout
        self._posarg_name = posarg_name
        self._restarg_name = restarg_name

    def run(self, argv):
        return self.run_command(self.root, list(argv))

    def run_command(self, command, argv):
        doc = (getdoc(command) or "").strip("\n")
        delegate_mode = getattr(command, "delegate_mode", isclass(command))

        # An invalid doc-string makes docopt raise DocoptLanguageError.
        try:
            options = docopt(doc, argv=argv, help=False, options_first=delegate_mode)
        except DocoptExit:
            raise CommandError("Invalid arguments.", command) from None

        if options.get("--help", False) or options.get("-h", False):
            if doc:
                print(doc, file=self.out)
            sys.exit()

        if options.get("--version", False):
            version = getattr(command, "__version__", self.version)
            if version is None:
                raise ArgumentError(command, "--version")

            print(version, file=self.out)
            sys.exit()

        name = options.get(self._posarg_name) or ""
        if delegate_mode and name:
            key = name.replace("-", "_")
            if key.startswith("_"):
                raise ArgumentError(command, name)

            group = command(options)
            handler = getattr(group, key, None)
            if handler is None or not callable(handler):
                raise CommandNotFoundError(command, name)

            log.debug("dispatching %r with %r", name, options.get(self._restarg_name))
            return self.run_command(handler, options.get(self._restarg_name) or [])

        if callable(command) and not isclass(command):
            return command(options)

        raise CommandError("No command is given.", command)
