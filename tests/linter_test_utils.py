import astroid  # type: ignore[import-untyped]


class MockLinter:
    def __init__(self) -> None:
        self.messages = []
        self.emitted = []
        self.config = type("config", (), {})()
        self.current_name = "test_module"

    def add_message(self, msg_id, _line=None, node=None, args=None, *_args, **_kwargs):
        self.messages.append(msg_id)
        self.emitted.append((msg_id, node, args))

    def _register_options_provider(self, provider):
        pass


def run_checker(checker_cls, code, filename="test.py", linter=None, **checker_kwargs) -> list:
    """Walk code depth-first the way pylint does, calling visit_/leave_ hooks."""
    linter = linter or MockLinter()
    checker = checker_cls(linter, **checker_kwargs)
    tree = astroid.parse(code, path=filename)
    tree.file = filename

    def _walk(node):
        node_name = node.__class__.__name__.lower()

        if hasattr(checker, f"visit_{node_name}"):
            getattr(checker, f"visit_{node_name}")(node)

        for child in node.get_children():
            _walk(child)

        if hasattr(checker, f"leave_{node_name}"):
            getattr(checker, f"leave_{node_name}")(node)

    _walk(tree)
    return linter.messages
