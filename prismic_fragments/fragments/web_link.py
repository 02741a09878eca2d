# (c) Nelen & Schuurmans

from html import escape
from typing import Optional

from ..base.domain import InvalidFragment
from ..base.domain import Json
from ..base.domain import LinkFragment
from ..base.domain import LinkResolver

__all__ = ["WebLink"]


class WebLink(LinkFragment):
    """A link to a resource online, given by its absolute URL.

    This is what the API returns for a link towards a web page or a media
    file.
    """

    url: str
    target: str | None = None
    content_type: str | None = None

    def as_html(self, link_resolver: Optional[LinkResolver] = None) -> str:
        url = escape(self.url)
        if self.target:
            target = f' target="{escape(self.target)}" rel="noopener"'
        else:
            target = ""
        return f'<a href="{url}"{target}>{url}</a>'

    def as_text(self) -> str:
        return self.get_url()

    def get_url(self, link_resolver: Optional[LinkResolver] = None) -> str:
        return self.url

    def get_target(self) -> str | None:
        return self.target

    def get_content_type(self) -> str | None:
        return self.content_type

    @classmethod
    def parse(cls, json: Json) -> "WebLink":
        """Build a WebLink from the "value" part of a Link.web fragment.

        Only "url" and "target" are read; the content type is not part of
        the payload.
        """
        if not isinstance(json, dict):
            raise InvalidFragment(
                f"expected a JSON object, got {type(json).__name__}",
                type_name=cls.__name__,
            )
        return cls.create(
            **{key: json[key] for key in ("url", "target") if key in json}
        )
