# (c) Nelen & Schuurmans

from abc import abstractmethod
from typing import Optional
from typing import TYPE_CHECKING

from .value_object import ValueObject

if TYPE_CHECKING:
    from .link_resolver import LinkResolver

__all__ = ["Fragment", "LinkFragment"]


class Fragment(ValueObject):
    """A typed piece of content as returned by the content API."""

    @abstractmethod
    def as_html(self, link_resolver: Optional["LinkResolver"] = None) -> str:
        pass

    @abstractmethod
    def as_text(self) -> str:
        pass


class LinkFragment(Fragment):
    """A fragment pointing somewhere.

    Links are found either as fragments of their own (e.g. a "related" field)
    or inside a hyperlink span of a structured text fragment.
    """

    @abstractmethod
    def get_url(self, link_resolver: Optional["LinkResolver"] = None) -> str | None:
        pass
