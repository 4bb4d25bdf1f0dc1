from dfastack.common.jsonnet import FromJsonnet, load_jsonnet  # noqa: F401
