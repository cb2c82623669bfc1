import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('..'))

import unifi_network_api  # noqa: E402

project = 'unifi-network-api'
copyright = f'{datetime.now().year}, Tyler Woods'
author = 'Tyler Woods'
release = unifi_network_api.__version__
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

master_doc = 'index'
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

autosummary_generate = True
autosummary_imported_members = False
autodoc_member_order = 'bysource'
autoclass_content = 'both'
autodoc_typehints = 'description'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}
autodoc_inherit_docstrings = True


def skip_private_model_fields(app, what, name, obj, skip, options):
    if name in ('_extra_fields', '_nested_models'):
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_private_model_fields)


html_theme = 'sphinx_rtd_theme'
html_title = f"{project} {release}"

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
    'tenacity': ('https://tenacity.readthedocs.io/en/latest/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_admonition_for_notes = True
napoleon_use_ivar = True
napoleon_use_rtype = True
