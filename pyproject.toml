[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zbplugins"
version = "1.5.0"
description = "Chat-bot toolkit: connection configuration, coloured logging and the transport-free logic of a set of group-chat plugins"
requires-python = ">=3.10"
dependencies = []
keywords = ["chatbot", "onebot", "plugins", "group-chat", "emoji", "gacha", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zbplugins = "zbplugins.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zbplugins"]

[tool.pytest.ini_options]
addopts = "-ra"
