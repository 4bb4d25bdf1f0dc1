import argparse
from typing import Callable, ClassVar, Dict, Optional, Sequence, Type


class Subcommand:
    _registry: ClassVar[Dict[str, Type["Subcommand"]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[Type["Subcommand"]], Type["Subcommand"]]:
        def wrapper(subcommand: Type["Subcommand"]) -> Type["Subcommand"]:
            if name in cls._registry:
                raise ValueError(f"Subcommand '{name}' was already registered.")
            cls._registry[name] = subcommand
            return subcommand

        return wrapper

    def __init__(self, parser: argparse.ArgumentParser) -> None:
        self.parser = parser
        self._subcommands: Dict[str, Subcommand] = {}
        if type(self) is Subcommand:
            subparsers = parser.add_subparsers()
            for name, subcommand_class in self._registry.items():
                subparser = subparsers.add_parser(name, help=subcommand_class.__doc__)
                subcommand = subcommand_class(subparser)
                subparser.set_defaults(__subcommand=subcommand)
                self._subcommands[name] = subcommand
        self.setup()

    def setup(self) -> None:
        pass

    def run(self, args: argparse.Namespace) -> None:
        self.parser.print_help()

    def __call__(self, args: Optional[Sequence[str]] = None) -> None:
        namespace = self.parser.parse_args(args)
        subcommand = getattr(namespace, "__subcommand", self)
        subcommand.run(namespace)
