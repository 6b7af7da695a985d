"""Project layout: cmd/server entry point with internal/, pkg/ and test/."""


def project_main_go(project_name: str) -> str:
    return f"""\
package main

import (
	"fmt"
	"os"
)

func main() {{
	if err := run(); err != nil {{
		fmt.Fprintln(os.Stderr, err)
		os.Exit(1)
	}}
}}

func run() error {{
	fmt.Println("Starting {project_name} server...")
	return nil
}}
"""


def project_readme(project_name: str) -> str:
    return f"""\
# {project_name}

## Layout

```
{project_name}/
├── cmd/server/    # application entry point
├── internal/      # private packages
├── pkg/           # public packages
├── test/          # integration tests and fixtures
└── bin/           # build output
```

## Build

```bash
go build -o bin/{project_name} ./cmd/server
```

## Run

```bash
go run ./cmd/server
```
"""
