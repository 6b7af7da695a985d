"""Example user-level configuration written by ``gosprout config init``."""


def global_config_toml() -> str:
    return """\
# gosprout global configuration
# Location: ~/.gosprout/config.toml

[defaults]
author = ""
license = "MIT"

# Project templates
# Usage: gosprout new <name> --mode <template>
#
# A template extends a built-in mode (simple or project) with extra
# directories, files and commands. Projects created from a template also get
# a .gosprout.toml file.

[templates.api]
description = "Web API project with common structure"
mode = "project"
dirs = [
    "api",
    "configs",
    "scripts",
]

[templates.api.commands]
dev = "go run ./cmd/server -env=dev"
lint = "golangci-lint run ./..."

[templates.cli]
description = "CLI tool project"
mode = "simple"
dirs = [
    "cmd",
]

[templates.cli.commands]
install = "go install ."

[templates.lib]
description = "Go library project"
mode = "simple"
dirs = [
    "examples",
]

[templates.lib.commands]
test = "go test -v -cover ./..."
bench = "go test -bench=. ./..."
"""
