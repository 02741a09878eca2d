# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.domain.exceptions import *  # NOQA
from .base.domain.fragment import *  # NOQA
from .base.domain.link_resolver import LinkResolver  # NOQA
from .base.domain.types import *  # NOQA
from .base.domain.value_object import ValueObject  # NOQA
from .fragments.parser import *  # NOQA
from .fragments.web_link import WebLink  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
