import os
from dataclasses import dataclass

import markdown

from app.domains.documents.errors import UnsupportedFormat


@dataclass
class Document:
    """Сущность документа: файл в хранилище"""
    name: str
    content: bytes = b""

    @property
    def extension(self) -> str:
        return extension_of(self.name)

    @property
    def format(self) -> "DocumentFormat":
        return DocumentFormat.for_name(self.name)

    def text(self) -> str:
        """Содержимое документа в виде строки"""
        return self.content.decode("utf-8", errors="replace")


@dataclass
class RenderedDocument:
    """Результат отображения документа"""
    media_type: str
    body: bytes


def extension_of(name: str) -> str:
    """Расширение имени файла вместе с точкой ("" если его нет)"""
    return os.path.splitext(name)[1]


class DocumentFormat:
    """Формат документа, выбирается один раз по расширению имени"""

    extension: str = ""

    @classmethod
    def for_name(cls, name: str) -> "DocumentFormat":
        extension = extension_of(name)
        for fmt in (PlainText, Markdown):
            if extension == fmt.extension:
                return fmt()
        return Unsupported(extension)

    def render_for_display(self, content: bytes) -> RenderedDocument:
        raise NotImplementedError

    def render_for_edit(self, content: bytes) -> bytes:
        return content

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.extension == other.extension

    def __repr__(self) -> str:
        return f"{type(self).__name__}(extension={self.extension!r})"


class PlainText(DocumentFormat):
    extension = ".txt"

    def render_for_display(self, content: bytes) -> RenderedDocument:
        return RenderedDocument(media_type="text/plain", body=content)


class Markdown(DocumentFormat):
    extension = ".md"

    def render_for_display(self, content: bytes) -> RenderedDocument:
        html = markdown.markdown(content.decode("utf-8", errors="replace"))
        return RenderedDocument(media_type="text/html", body=html.encode("utf-8"))


class Unsupported(DocumentFormat):

    def __init__(self, extension: str):
        self.extension = extension

    def render_for_display(self, content: bytes) -> RenderedDocument:
        raise UnsupportedFormat(self.extension)

    def render_for_edit(self, content: bytes) -> bytes:
        raise UnsupportedFormat(self.extension)


SUPPORTED_EXTENSIONS = (PlainText.extension, Markdown.extension)


def render_for_display(name: str, content: bytes) -> RenderedDocument:
    """Представление документа для просмотра в зависимости от расширения"""
    return DocumentFormat.for_name(name).render_for_display(content)


def render_for_edit(name: str, content: bytes) -> bytes:
    """Исходное содержимое документа для формы редактирования"""
    return DocumentFormat.for_name(name).render_for_edit(content)
