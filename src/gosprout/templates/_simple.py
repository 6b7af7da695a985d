"""Simple layout: a single main package at the module root."""


def simple_main_go(project_name: str) -> str:
    return f"""\
package main

import "fmt"

func main() {{
	fmt.Println("Hello from {project_name}!")
}}
"""


def simple_readme(project_name: str) -> str:
    return f"""\
# {project_name}

A Go application.

## Build

```bash
go build -o bin/{project_name} .
```

## Run

```bash
go run .
```
"""
