from markupsafe import Markup

from .base import BaseComponent, content_tag


class LinkComponent(BaseComponent):
    def __init__(self, href: str, text: str, class_name: str = "text-blue-600 hover:underline") -> None:
        self.href = href
        self.text = text
        self.class_name = class_name

    def call(self) -> Markup:
        return content_tag("a", self.text, {"href": self.href, "class": self.class_name})
