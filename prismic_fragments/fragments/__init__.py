# (c) Nelen & Schuurmans

from .parser import *  # NOQA
from .web_link import *  # NOQA
