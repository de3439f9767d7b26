"""Common literal values used across portfolio_site.

These constants keep the fixed input paths, template names, and output file
mode in one place so the generator, CLI, and tests agree on them.

Examples
--------
>>> from portfolio_site import _constants
>>> _constants.LAYOUT_TEMPLATE
'layout.html'
>>> oct(_constants.OUTPUT_FILE_MODE)
'0o644'
"""

DEFAULT_CONFIG_PATH = "config.yml"
DEFAULT_TEMPLATES_DIR = "templates"
DEFAULT_OUTPUT_DIR = "build"
LAYOUT_TEMPLATE = "layout.html"
OUTPUT_FILE_MODE = 0o644
