[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopatterns"
version = "1.0.0"
description = "Small, runnable demonstrations of the classic object-oriented design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "gang-of-four",
    "factory",
    "builder",
    "observer",
    "visitor",
    "examples",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gopatterns-abstract-factory = "gopatterns.abstract_factory:main"
gopatterns-adapter = "gopatterns.adapter:main"
gopatterns-bridge = "gopatterns.bridge:main"
gopatterns-builder = "gopatterns.builder:main"
gopatterns-chain = "gopatterns.chain:main"
gopatterns-command = "gopatterns.command:main"
gopatterns-composite = "gopatterns.composite:main"
gopatterns-decorator = "gopatterns.decorator:main"
gopatterns-facade = "gopatterns.facade:main"
gopatterns-factory = "gopatterns.factory:main"
gopatterns-flyweight = "gopatterns.flyweight:main"
gopatterns-iterator = "gopatterns.iterator:main"
gopatterns-mediator = "gopatterns.mediator:main"
gopatterns-memento = "gopatterns.memento:main"
gopatterns-observer = "gopatterns.observer:main"
gopatterns-prototype = "gopatterns.prototype:main"
gopatterns-proxy = "gopatterns.proxy:main"
gopatterns-state = "gopatterns.state:main"
gopatterns-strategy = "gopatterns.strategy:main"
gopatterns-template = "gopatterns.template:main"
gopatterns-visitor = "gopatterns.visitor:main"
gopatterns-singleton = "gopatterns.singleton:main"

[tool.hatch.build.targets.wheel]
packages = ["gopatterns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
