import argparse
import inspect
import typing
from typing import Any, Callable, ClassVar, Dict, Iterator, Literal, Optional, Sequence, Type, Union


class Workflow:
    """
    Base class of command line workflows. Every public method of a subclass
    becomes a subcommand whose arguments are derived from its signature.
    Positional parameters become positional arguments and keyword-only
    parameters become `--options`.
    """

    _registry: ClassVar[Dict[str, Type["Workflow"]]] = {}

    @classmethod
    def register(cls, name: str, exist_ok: bool = False) -> Callable[[Type["Workflow"]], Type["Workflow"]]:
        def wrapper(workflow: Type["Workflow"]) -> Type["Workflow"]:
            if not exist_ok and name in cls._registry:
                raise ValueError(f"Workflow '{name}' was already registered.")
            cls._registry[name] = workflow
            return workflow

        return wrapper

    @classmethod
    def by_name(cls, name: str) -> Type["Workflow"]:
        return cls._registry[name]

    @classmethod
    def available_names(cls) -> Sequence[str]:
        return list(cls._registry)

    @staticmethod
    def _add_argument(parser: argparse.ArgumentParser, param: inspect.Parameter) -> None:
        arg_type: Any = param.annotation if param.annotation != inspect.Parameter.empty else str
        optional = param.default != inspect.Parameter.empty
        default = param.default if optional else None
        choices = None

        origin = typing.get_origin(arg_type)
        args = typing.get_args(arg_type)
        if origin == Union and len(args) == 2 and args[1] == type(None):  # noqa: E721
            arg_type = args[0]
            optional = True
            origin = typing.get_origin(arg_type)
            args = typing.get_args(arg_type)
        if origin == Literal:
            choices = list(args)
            arg_type = type(args[0])

        positional = param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)

        help_message = arg_type.__name__
        if optional:
            help_message += f" (default: {default})"
        elif not positional:
            help_message += " (required)"

        kwargs: Dict[str, Any] = {"help": help_message, "type": arg_type}
        if choices is not None:
            kwargs["choices"] = choices
        if optional:
            kwargs["default"] = default
        elif not positional:
            kwargs["required"] = True

        if positional:
            if optional:
                kwargs["nargs"] = "?"
            parser.add_argument(param.name, **kwargs)
        else:
            parser.add_argument("--" + param.name.replace("_", "-"), **kwargs)

    @classmethod
    def _setup_parser(cls, parser: argparse.ArgumentParser, func: Callable) -> argparse.ArgumentParser:
        parser.set_defaults(__func=func)
        parser.description = func.__doc__
        for name, param in inspect.signature(func).parameters.items():
            if name != "self":
                cls._add_argument(parser, param)
        return parser

    @classmethod
    def _collect_methods(cls) -> Iterator[Callable]:
        for name, func in inspect.getmembers(cls, predicate=inspect.isfunction):
            if not name.startswith("_"):
                yield func

    @classmethod
    def build_parser(cls, prog: Optional[str] = None) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=prog, description=cls.__doc__)
        subparsers = parser.add_subparsers()
        for func in cls._collect_methods():
            subparser = subparsers.add_parser(func.__name__, help=func.__doc__)
            cls._setup_parser(subparser, func)
        return parser

    @classmethod
    def run(cls, args: Optional[Sequence[str]] = None) -> None:
        args = args or ["--help"]
        namespace = cls.build_parser().parse_args(args)
        params = vars(namespace)
        func = params.pop("__func")
        kwargs = {key.replace("-", "_"): value for key, value in params.items()}
        func(cls(), **kwargs)
