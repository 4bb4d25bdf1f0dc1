import copy
import json
import os
from os import PathLike
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar, Union

import colt
from rjsonnet import evaluate_file, evaluate_snippet


def _environment_variables() -> Dict[str, str]:
    return {key: value for key, value in os.environ.items() if value == "" or value.encode("utf-8", "ignore")}


def parse_overrides(serialized_overrides: str, ext_vars: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Evaluate a jsonnet / JSON object of dotted-key overrides such as
    `{"conversion.worklist": "lifo"}`.
    """
    if not serialized_overrides:
        return {}
    ext_vars = {**_environment_variables(), **(ext_vars or {})}
    output = json.loads(evaluate_snippet("", serialized_overrides, ext_vars=ext_vars))
    if not isinstance(output, dict):
        raise ValueError(f"Overrides must be a JSON object, got {type(output).__name__}")
    return output


def _child_key(node: Any, key: str, path: str) -> Union[str, int]:
    if isinstance(node, dict):
        return key
    if isinstance(node, list):
        if not key.isdigit() or int(key) >= len(node):
            raise ValueError(f"overrides for '{path}.*' expected an index below {len(node)}, found '{key}'")
        return int(key)
    raise ValueError(f"overrides for '{path}.*' expected list or dict, found {type(node)} instead")


def apply_overrides(config: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge dotted-key overrides into a copy of `config`. Integer keys index
    into lists, e.g. `nfa.start_states.0`.
    """
    merged = copy.deepcopy(config)
    for dotted_key, value in overrides.items():
        *parents, leaf = dotted_key.split(".")
        node: Any = merged
        for index, key in enumerate(parents):
            child = _child_key(node, key, ".".join(parents[:index]))
            if isinstance(node, dict) and child not in node:
                raise ValueError(f"overrides dict contains unused key: {'.'.join(parents[: index + 1])}")
            node = node[child]
        node[_child_key(node, leaf, ".".join(parents))] = copy.deepcopy(value)
    return merged


def load_jsonnet(
    filename: Union[str, PathLike],
    ext_vars: Optional[Mapping[str, Any]] = None,
    overrides: Optional[str] = None,
) -> Any:
    ext_vars = {**_environment_variables(), **(ext_vars or {})}
    output = json.loads(evaluate_file(str(filename), ext_vars=ext_vars))
    if overrides:
        output = apply_overrides(output, parse_overrides(overrides, ext_vars=ext_vars))
    return output


_T_FromJsonnet = TypeVar("_T_FromJsonnet", bound="FromJsonnet")


class FromJsonnet:
    __COLT_BUILDER__: ClassVar = colt.ColtBuilder(typekey="type")

    @classmethod
    def from_json(cls: Type[_T_FromJsonnet], json_config: Any) -> _T_FromJsonnet:
        obj: _T_FromJsonnet = cls.__COLT_BUILDER__(json_config, cls)
        setattr(obj, "__json_config__", json_config)
        return obj

    @classmethod
    def from_jsonnet(
        cls: Type[_T_FromJsonnet],
        filename: Union[str, PathLike],
        ext_vars: Optional[Mapping[str, Any]] = None,
        overrides: Optional[str] = None,
    ) -> _T_FromJsonnet:
        return cls.from_json(load_jsonnet(filename, ext_vars=ext_vars, overrides=overrides))

    def to_json(self) -> Any:
        return getattr(self, "__json_config__")
