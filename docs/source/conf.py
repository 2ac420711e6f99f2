# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

import os
import time
import datetime
import petnamer

if os.environ.get('SOURCE_DATE_EPOCH'):
    epoch = int(os.environ.get('SOURCE_DATE_EPOCH', time.gmtime()))
    year = datetime.datetime.fromtimestamp(epoch, datetime.timezone.utc).year
else:
    year = datetime.datetime.now().year


project = 'petnamer'
copyright = u'%d, petnamer contributors' % year
author = 'petnamer contributors'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

templates_path = ['_templates']
exclude_patterns = []


# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = "alabaster"
html_static_path = ['_static']

release = petnamer.__version__
version = release

pygments_style = 'sphinx'

extensions = [
   'sphinx.ext.autodoc',
   'sphinx.ext.autosummary',
]

autodoc_default_options = {
    'member-order': 'groupwise'
}

autodoc_mock_imports = [
    "distributed",
]
