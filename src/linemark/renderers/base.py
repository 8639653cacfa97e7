#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/renderers/base.py
"""Base class for tree renderers.

Renderers turn a parsed :class:`~linemark.ast.Document` into text. Subclasses
implement :meth:`BaseRenderer.render_to_string`; writing the result to a path
or stream is shared here.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from linemark.ast import Document
from linemark.exceptions import OutputWriteError


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Examples
    --------
    Creating a custom renderer:

        >>> class HeadingCounter(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(sum(isinstance(n, Heading) for n in doc.children))

    """

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the tree to a string.

        Parameters
        ----------
        doc : Document
            Root of the tree to render

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write it to ``output``.

        Parameters
        ----------
        doc : Document
            Root of the tree to render
        output : str, Path, IO[bytes] or IO[str]
            Destination file path, or a binary or text stream

        Raises
        ------
        OutputWriteError
            If a destination path cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write rendered text to a file path or stream.

        Paths are written as UTF-8. Streams are written as bytes when they are
        binary and as text otherwise.

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("<p>x</p>", buffer)
            >>> buffer.getvalue()
            b'<p>x</p>'

        """
        if isinstance(output, (str, Path)):
            try:
                Path(output).write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
            return

        if isinstance(output, (io.BufferedIOBase, io.RawIOBase)) or "b" in getattr(output, "mode", ""):
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(text)  # type: ignore[arg-type]
