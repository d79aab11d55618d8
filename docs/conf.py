"""Sphinx configuration for hashicon documentation."""

project = "hashicon"
copyright = "2025, hashicon contributors"
author = "hashicon contributors"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "sphinx.ext.doctest",
    "sphinx_autodoc_typehints",
]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# Google-style docstrings throughout.
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = False

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}
# Shape builders and colour tuples are documented through their modules.
autodoc_type_aliases = {
    "Colour": "hashicon.model.colour.Colour",
    "Rgba": "hashicon.model.colour.Rgba",
    "Primitive": "hashicon.model.shapes.Primitive",
}

always_document_param_types = True
typehints_defaults = "braces"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "matplotlib": ("https://matplotlib.org/stable/", None),
}

html_theme = "sphinx_rtd_theme"
html_title = "hashicon"
html_theme_options = {
    "navigation_depth": 2,
}
