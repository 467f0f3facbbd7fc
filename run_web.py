#!/usr/bin/env python
"""Web server startup script for local development."""

import sys

from sectioncms.cli import cli

if __name__ == "__main__":
    config_path = sys.argv[1] if len(sys.argv) > 1 else "config.toml"
    cli(["--config", config_path, "serve"], obj={})
