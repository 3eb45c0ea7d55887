[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jslexer"
version = "0.1.0"
description = "A lexer for JavaScript/ECMAScript source code with line and column tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["javascript", "ecmascript", "lexer", "tokenizer", "scanner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jslexer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
