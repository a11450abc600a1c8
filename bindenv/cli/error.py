from inspect import getdoc

__all__ = (
    "ArgumentError",
    "CommandError",
    "CommandNotFoundError",
)


def _append_usage(message, command):
    doc = getdoc(command)
    if doc:
        message = message.strip("\n") + "\n\n" + doc.strip("\n")
    return message


class CommandError(SystemExit):
    """Exit with `message` (and the usage of `command`, if given)."""

    def __init__(self, message, command=None):
        if command is not None:
            message = _append_usage(message, command)

        super().__init__(message)

        self.command = command


class CommandNotFoundError(CommandError):
    def __init__(self, command, name):
        super().__init__(f"Command '{name}' not found.", command)

        self.name = name


class ArgumentError(CommandError):
    def __init__(self, command, argv):
        if isinstance(argv, (list, tuple)):
            message = "Unexpected argument(s): '{}'".format(" ".join(argv))
        else:
            message = f"Unexpected argument: '{argv}'"

        super().__init__(message, command)
