[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlreadme"
version = "0.1.0"
description = "Summarize the YAML files of a repository into a Markdown overview using a local Ollama model"
requires-python = ">=3.10"
keywords = ["yaml", "markdown", "documentation", "ollama", "llm", "summary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[project.scripts]
summarize-yaml = "yamlreadme.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yamlreadme"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
