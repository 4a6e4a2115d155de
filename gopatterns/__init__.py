"""Runnable demonstrations of the classic object-oriented design patterns, one module each."""

__version__ = "1.0.0"

__all__ = [
    "abstract_factory",
    "adapter",
    "bridge",
    "builder",
    "chain",
    "command",
    "composite",
    "decorator",
    "facade",
    "factory",
    "flyweight",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "prototype",
    "proxy",
    "state",
    "strategy",
    "template",
    "visitor",
    "singleton",
]