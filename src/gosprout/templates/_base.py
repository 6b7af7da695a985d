"""Files shared by every layout."""


def gitignore() -> str:
    return """\
# Build output
bin/

# Test binaries and coverage
*.test
*.out
coverage.html

# Workspace files
go.work
go.work.sum

# Editors and OS
.idea/
.vscode/
*.swp
.DS_Store

# Environment
.env
"""
