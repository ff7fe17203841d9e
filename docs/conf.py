import os
import sys

sys.path.insert(0, os.path.abspath(".."))

project = "Solana Agent Kit"
copyright = "2025, Solana Agent Kit contributors"
author = "Solana Agent Kit contributors"
release = "1.0.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.githubpages",
    "myst_parser",
]

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
master_doc = "index"

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"
html_static_path = []

autodoc_typehints = "description"
autodoc_member_order = "bysource"
