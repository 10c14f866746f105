"""
safesdl - data
Package metadata

(c) 2023 safesdl contributors
This file is released under the GNU GPL version 3 or later.
"""

import json
from importlib import resources

# copyright metadata
_METADATA = json.loads(resources.files(__package__).joinpath('meta.json').read_bytes())
NAME, VERSION, AUTHOR, COPYRIGHT, DESCRIPTION = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright', 'description'
))
