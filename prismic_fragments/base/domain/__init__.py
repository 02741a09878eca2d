# (c) Nelen & Schuurmans

from .exceptions import *  # NOQA
from .fragment import *  # NOQA
from .link_resolver import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
