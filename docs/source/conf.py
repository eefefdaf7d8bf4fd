import os
import sys

import tomlkit

sys.path.insert(0, os.path.abspath("../../src"))

PYPROJECT_PATH = os.path.abspath("../../pyproject.toml")
MODULE_PREFIX = "css_selector_builder.css_selector_builder."


def read_release(path=PYPROJECT_PATH):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return str(tomlkit.parse(f.read())["project"]["version"])
    except (FileNotFoundError, KeyError):
        return "0.0.0"


# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

release = read_release()
version = ".".join(release.split(".")[:2])

project = "CSS Selector Builder"
copyright = "2025, css-selector-builder contributors"
author = "css-selector-builder contributors"

# -- General configuration ---------------------------------------------------

extensions = ["sphinx.ext.autodoc", "sphinx.ext.viewcode", "sphinx.ext.napoleon"]
napoleon_google_docstring = True
autodoc_member_order = "bysource"
autodoc_typehints = "description"

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"


def keep_init(app, what, name, obj, skip, options):
    if name == "__init__":
        return False
    return skip


def strip_module_prefix(app, what, name, obj, options, lines):
    lines[:] = [line.replace(MODULE_PREFIX, "") for line in lines]


def setup(app):
    app.connect("autodoc-skip-member", keep_init)
    app.connect("autodoc-process-docstring", strip_module_prefix)
