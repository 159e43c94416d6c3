"""Default configuration values and starter .riskcard.toml template."""

DEFAULT_TOML = """\
# riskcard configuration
version = "1.0"

[output]
format = "v2"              # v1 | v2 | terminal
show_details = false
show_annotations = false
log_level = "info"         # debug | info | warn | error; detail entries below this are dropped

[checks]
# enable = ["Binary-Artifacts", "License"]   # empty = all enabled
# disable = ["Vulnerabilities"]
# max_workers = 4

[docs]
# catalog = "docs/checks.yaml"   # default: bundled catalog
"""
