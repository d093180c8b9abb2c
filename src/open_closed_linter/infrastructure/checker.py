"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    [tool.pylint.main]
    load-plugins = ["open_closed_linter.infrastructure.checker"]
"""

from pylint.lint import PyLinter

from open_closed_linter.infrastructure.di.container import OpenClosedContainer
from open_closed_linter.use_cases.checks.function_count import FunctionCountChecker
from open_closed_linter.use_cases.checks.open_closed import OpenClosedChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = OpenClosedContainer.get_instance()
    config_loader = container.get_config_loader()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(
        OpenClosedChecker(
            linter,
            type_resolver=container.get_type_resolver(),
            config_loader=config_loader,
            registry=registry,
        )
    )
    linter.register_checker(FunctionCountChecker(
        linter, config_loader=config_loader, registry=registry))
