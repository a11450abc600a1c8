import json
import logging
import sys
from inspect import getdoc

import ruamel.yaml as yaml

from .. import (
    __version__ as package_version,
    __name__ as package_name,
)
from ..env import (
    BindingError,
    ENVIRONMENT_KEY,
    ServiceNotFoundError,
    load_env,
    load_env_from_file,
)
from .error import CommandError, CommandNotFoundError
from .dispatcher import Dispatcher

log = logging.getLogger(__name__)


class Bindenv:
    """bindenv inspects the services bound to an application.

    Usage:
        bindenv [options]
        bindenv [options] <command> [<args>...]

    Options:
        -f <path>, --file <path>  Read the catalog from a file instead of the
                                  environment
        -k <name>, --key <name>   Catalog key and environment variable name
                                  [default: VCAP_SERVICES]
        -v, --verbose             Log what bindenv does
        --help                    Print help message and exit
        --version                 Print version and exit

    Available commands include:
        services  List the names of the bound services
        show      Print the configuration of a service
        help      Get help on a command
        version   Show the bindenv version information
    """

    delegate_mode = True
    __version__ = "{} {}".format(package_name, package_version)

    def __init__(self, options, out=None):
        self.global_option = options
        self.out = out or sys.stdout

        logging.basicConfig(
            level=logging.DEBUG if options.get("--verbose") else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    def _load(self):
        key = self.global_option.get("--key") or ENVIRONMENT_KEY
        path = self.global_option.get("--file")

        try:
            if path:
                return load_env_from_file(path, key=key)
            return load_env(key=key)
        except (BindingError, OSError, ValueError) as e:
            raise CommandError(f"Cannot load services: {e}") from e

    def services(self, options):
        """services lists the names of the bound services, lower-cased.

        Usage:
            services [options]

        Options:
            --help     Print help message and exit
        """
        env = self._load()
        log.debug("catalog read from %s", env.source)

        for name in sorted(env):
            print(name, file=self.out)

    def show(self, options):
        """show prints the configuration of a service as YAML.

        Usage:
            show [options] <name>

        Options:
            --json     Print JSON instead of YAML
            --help     Print help message and exit
        """
        env = self._load()
        name = options["<name>"]

        if name not in env:
            raise CommandError(str(ServiceNotFoundError(name)))
        payload = env.get(name)

        if options.get("--json"):
            print(json.dumps(payload, indent=2, sort_keys=True), file=self.out)
            return

        dumper = yaml.YAML(typ="safe", pure=True)
        dumper.default_flow_style = False
        dumper.dump(payload, self.out)

    def help(self, options):
        """help prints the help message of a command

        Usage:
            help <command>
        """
        name = options.get("<command>", "").strip()
        if not name:
            raise CommandError("Command not given.", self.help)
        if name.startswith("_"):
            raise CommandError("Invalid command.")

        fn = getattr(self, name, None)
        if fn is None:
            raise CommandNotFoundError(self.help, name)

        print(getdoc(fn), file=self.out)

    def version(self, _):
        """version prints the bindenv version

        Usage:
            version
        """
        print(self.__version__, file=self.out)


def main(argv=None):
    dispatcher = Dispatcher(Bindenv)
    dispatcher.run(sys.argv[1:] if argv is None else argv)
