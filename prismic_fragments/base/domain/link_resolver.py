# (c) Nelen & Schuurmans

from abc import ABC
from abc import abstractmethod

from .fragment import LinkFragment

__all__ = ["LinkResolver"]


class LinkResolver(ABC):
    """Turns links to documents of the repository into URLs of your site.

    Links that carry an absolute URL already (web links, media links) do
    not consult the resolver.
    """

    @abstractmethod
    def resolve(self, link: LinkFragment) -> str | None:
        pass

    def resolve_link(self, link: LinkFragment) -> str | None:
        return link.get_url(self)
