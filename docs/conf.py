"""Sphinx configuration file for proxroute documentation.

The API pages are generated from the ``proxroute.core`` and
``proxroute.data`` docstrings; the ``paths`` command reference comes from
the click definitions through sphinx-click.
"""

import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

from proxroute.__version__ import __version__  # noqa: E402

# Project information
project = 'proxroute'
copyright = '2026, proxroute Team'
author = 'proxroute Team'
version = release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_click',
]

templates_path = ['_templates']
exclude_patterns = ['_build']

# Keep modules in source order: vertex model, then graph, then search
autodoc_member_order = 'bysource'
autodoc_typehints = 'description'
autodoc_mock_imports = ['tqdm']

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'pandas': ('https://pandas.pydata.org/docs/', None),
}

html_theme = 'sphinx_rtd_theme'
html_title = f'proxroute {release}: shortest paths over 3D proximity graphs'
html_static_path = ['_static']

# Docstrings are Google style (Args/Returns/Raises)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_rtype = False
